from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CardDataMetadata(BaseModel):
    """Summary written next to cards.json for inspection without the payload."""

    model_config = ConfigDict(populate_by_name=True)

    last_updated: str = Field(alias="lastUpdated")
    bulk_data_updated: str = Field(alias="bulkDataUpdated")
    format_counts: dict[str, int] = Field(alias="formatCounts")
    total_cards: int = Field(alias="totalCards")
    file_size: int = Field(alias="fileSize")


class CardDataFile(BaseModel):
    """The production card file consumed by the game client."""

    model_config = ConfigDict(populate_by_name=True)

    cards: list[dict[str, Any]]
    format_counts: dict[str, int] = Field(alias="formatCounts")
    last_updated: str = Field(alias="lastUpdated")
    bulk_data_updated: str = Field(alias="bulkDataUpdated")
    total_cards: int = Field(alias="totalCards")
