"""Base class for records decoded from blockchain.info responses."""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Immutable record populated from a single decode step."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )
