"""Receive payments and balance update records."""

from typing import Optional

from pydantic import Field

from blockchain_api.models.base import ApiModel


class ReceivePaymentResponse(ApiModel):
    """A freshly generated receive address."""
    address: str
    callback: str
    index: int


class XpubGap(ApiModel):
    """Number of unused addresses since the last one that received funds."""
    gap: int = 0


class CallbackLog(ApiModel):
    callback_url: Optional[str] = Field(default=None, alias="callback")
    called_at: Optional[str] = None
    raw_response: Optional[str] = None
    response_code: int = 0


class BalanceUpdateRequest(ApiModel):
    """Body of a balance update subscription."""
    address: Optional[str] = Field(default=None, alias="addr")
    callback: Optional[str] = None
    confirmations: Optional[int] = Field(default=None, alias="confs")
    key: Optional[str] = None
    notification: Optional[str] = Field(default=None, alias="onNotification")
    operation_type: Optional[str] = Field(default=None, alias="op")


class BalanceUpdateResponse(ApiModel):
    address: str = Field(alias="addr")
    callback: str
    confirmations: int = Field(alias="confs")
    id: int
    notification: str = Field(alias="onNotification")
    operation_type: str = Field(alias="op")
