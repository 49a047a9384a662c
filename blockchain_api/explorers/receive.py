"""
Receive payments API (api.blockchain.info/v2).

Generates fresh receive addresses for an xpub and manages balance update
subscriptions. Every call needs a Receive API key, which is separate from the
general API code.
"""

from typing import List, Optional
from urllib.parse import quote

import structlog

from blockchain_api.core.exceptions import (
    InvalidApiKeyError,
    InvalidXpubError,
    ServerApiError,
)
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.query_string import QueryString
from blockchain_api.core.validation import require_range, require_text
from blockchain_api.models.receive import (
    BalanceUpdateRequest,
    BalanceUpdateResponse,
    CallbackLog,
    ReceivePaymentResponse,
    XpubGap,
)

logger = structlog.get_logger(__name__)

INVALID_XPUB = "Invalid xpub format"
INVALID_API_KEY = "API Key is not valid"


def _raise_client_error(error: ServerApiError, check_xpub: bool = True) -> None:
    """Re-raise known receive API failures as client errors."""
    if check_xpub and INVALID_XPUB in error.message:
        raise InvalidXpubError("xpub", "The xpub provided is invalid") from error
    if INVALID_API_KEY in error.message:
        raise InvalidApiKeyError("key", "The api key provided is invalid") from error


class Receive:
    """Receive address generation and callback inspection."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def generate_address(self,
                         xpub: str,
                         callback: str,
                         key: str,
                         gap_limit: Optional[int] = None) -> ReceivePaymentResponse:
        """
        Derive the next unused address of an xpub.

        Args:
            xpub: Extended public key to derive from
            callback: URL notified when the address receives a payment
            key: Receive API key
            gap_limit: Override of the allowed gap of unused addresses
        """
        require_text(xpub, "xpub")
        require_text(callback, "callback")
        require_text(key, "key")
        if gap_limit is not None:
            require_range(gap_limit, "gap_limit", 1)

        query_string = QueryString()
        query_string.add("xpub", xpub)
        query_string.add("callback", quote(callback, safe=""))
        query_string.add("key", key)
        if gap_limit is not None:
            query_string.add("gap_limit", gap_limit)

        try:
            response = self.http_client.get("receive", query_string, response_type=ReceivePaymentResponse)
        except ServerApiError as e:
            _raise_client_error(e)
            raise

        logger.info("Receive address generated", index=response.index)
        return response

    def check_address_gap(self, xpub: str, key: str) -> XpubGap:
        """Get the number of unused addresses since the last one that received funds."""
        require_text(xpub, "xpub")
        require_text(key, "key")

        query_string = QueryString()
        query_string.add("xpub", xpub)
        query_string.add("key", key)

        try:
            return self.http_client.get("receive/checkgap", query_string, response_type=XpubGap)
        except ServerApiError as e:
            _raise_client_error(e)
            raise

    def get_callback_logs(self, callback: str, key: str) -> List[CallbackLog]:
        require_text(callback, "callback")
        require_text(key, "key")

        query_string = QueryString()
        query_string.add("callback", quote(callback, safe=""))
        query_string.add("key", key)

        try:
            return self.http_client.get("receive/callback_log", query_string, response_type=List[CallbackLog])
        except ServerApiError as e:
            _raise_client_error(e, check_xpub=False)
            raise


class BalanceUpdate:
    """Subscriptions that notify a callback when an address balance changes."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def subscribe(self,
                  key: str,
                  address: str,
                  callback: str,
                  notification: str = "KEEP",
                  operation_type: str = "ALL",
                  confirmations: int = 3) -> BalanceUpdateResponse:
        """
        Subscribe to balance updates of an address.

        Args:
            key: Receive API key
            address: Address to watch
            callback: URL to notify
            notification: KEEP to keep notifying, DELETE to stop after the first one
            operation_type: SPEND, RECEIVE or ALL
            confirmations: Confirmations required before notifying
        """
        require_text(key, "key")
        require_text(address, "address")
        require_text(callback, "callback")
        require_range(confirmations, "confirmations", 0)

        request = BalanceUpdateRequest(
            key=key,
            address=address,
            callback=callback,
            confirmations=confirmations,
            notification=notification,
            operation_type=operation_type,
        )

        try:
            response = self.http_client.post("balance_update", request,
                                             response_type=BalanceUpdateResponse,
                                             content_type="application/json")
        except ServerApiError as e:
            _raise_client_error(e, check_xpub=False)
            raise

        logger.info("Balance update subscribed", subscription_id=response.id, operation_type=operation_type)
        return response
