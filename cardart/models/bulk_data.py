from pydantic import BaseModel, ConfigDict


class BulkDataDescriptor(BaseModel):
    """
    One downloadable Scryfall bulk data snapshot.

    Only the fields the job relies on are required; other keys in the
    discovery response are ignored.

    Attributes:
        type: Dataset kind (e.g., "oracle_cards", "default_cards")
        name: Human readable name
        updated_at: Upstream version timestamp, also the cache key
        size: Compressed download size in bytes
        download_uri: Where the dataset itself is served
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    name: str
    updated_at: str
    size: int
    download_uri: str
    id: str | None = None
    description: str | None = None
    content_type: str | None = None
    content_encoding: str | None = None

    @property
    def size_mb(self) -> float:
        return self.size / 1024 / 1024
