"""
Streaming Scryfall ingestion
"""
from .card_index import (
    CardIndex,
    CardRecord,
    PrintingsSetEntry,
    SetEntry,
    SingletonSetEntry,
)
from .driver import build_card_index, generate_scryfall_database
from .line_buffer import LineBuffer
from .normalizer import NormalizerStats, RecordNormalizer, merge_face, parse_line
from .progress import ProgressReporter

__all__ = [
    "CardIndex",
    "CardRecord",
    "LineBuffer",
    "NormalizerStats",
    "PrintingsSetEntry",
    "ProgressReporter",
    "RecordNormalizer",
    "SetEntry",
    "SingletonSetEntry",
    "build_card_index",
    "generate_scryfall_database",
    "merge_face",
    "parse_line",
]
