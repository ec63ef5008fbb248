from cardart.models.bulk_data import BulkDataDescriptor
from cardart.models.card import ImageUris, ProcessedCard, ProcessedFace, RawCard
from cardart.models.card_data_file import CardDataFile, CardDataMetadata
from cardart.models.formats import FORMAT_LEGALITY_KEYS, LEGAL_STATUS, GameFormat

__all__ = [
    "BulkDataDescriptor",
    "CardDataFile",
    "CardDataMetadata",
    "FORMAT_LEGALITY_KEYS",
    "GameFormat",
    "ImageUris",
    "LEGAL_STATUS",
    "ProcessedCard",
    "ProcessedFace",
    "RawCard",
]
