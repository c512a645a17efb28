"""
Scryfall dump line -> indexed card record(s)
"""
import copy
import dataclasses
import json
import logging
from typing import AbstractSet, Any, Dict, Iterable, Iterator, Optional, Tuple

from .. import constants
from .card_index import CardIndex, CardRecord

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass
class NormalizerStats:
    """
    Running counters for a single ingestion
    """

    lines: int = 0
    parse_failures: int = 0
    excluded: int = 0
    registered: int = 0


def merge_face(base: CardRecord, face: Dict[str, Any]) -> CardRecord:
    """
    Build the record of one face of a multi-faced card
    :param base: Parent card record, left untouched
    :param face: Face fields that override the parent's
    :return: New record
    """
    merged = copy.deepcopy(base)
    merged.update(copy.deepcopy(face))
    return merged


def parse_line(line: str) -> Optional[CardRecord]:
    """
    Decode one line of the dump
    :param line: Raw line text
    :return: Card record, or None if the line isn't one
    """
    # The dump is one big JSON array, written one object per line
    line = line.strip().rstrip(",")
    if not line:
        return None

    try:
        record = json.loads(line)
    except (ValueError, RecursionError):
        LOGGER.debug(f"Skipping unparsable line: {line[:80]}")
        return None

    if not isinstance(record, dict):
        return None
    return record


def _collector_number(record: CardRecord) -> Optional[str]:
    collector_number = record.get("collector_number")
    if isinstance(collector_number, int) and not isinstance(collector_number, bool):
        return str(collector_number)
    return collector_number


def is_indexable(record: CardRecord) -> bool:
    """
    Check the fields used as index keys have usable types
    :param record: Parsed card record
    :return: Whether the record can be indexed
    """
    collector_number = _collector_number(record)
    return (
        isinstance(record.get("name"), str)
        and isinstance(record.get("lang"), str)
        and (collector_number is None or isinstance(collector_number, str))
    )


def expand_record(
    record: CardRecord,
) -> Iterator[Tuple[CardRecord, str, str, str, Optional[str]]]:
    """
    Produce every (record, language, set, name, collector number) a card
    should be indexed under: itself, plus one entry per face for
    split, transform and adventure cards
    :param record: Parsed card record
    """
    language = str(record["lang"]).upper()
    set_code = record["set"]
    collector_number = _collector_number(record)
    base = {**record, "lang": language}

    yield base, language, set_code, base["name"], collector_number

    if base.get("layout") not in constants.MULTI_FACE_LAYOUTS:
        return

    faces = base.get("card_faces")
    if not isinstance(faces, list):
        return

    for face in faces:
        if not isinstance(face, dict) or not isinstance(face.get("name"), str):
            continue
        yield merge_face(base, face), language, set_code, face["name"], collector_number


class RecordNormalizer:
    """
    Turns dump lines into card index entries, dropping anything
    outside the allowed sets
    """

    index: CardIndex
    allowed_sets: AbstractSet[str]
    stats: NormalizerStats

    def __init__(self, index: CardIndex, allowed_sets: Iterable[str]) -> None:
        self.index = index
        self.allowed_sets = frozenset(allowed_sets)
        self.stats = NormalizerStats()

    def process_line(self, line: str) -> int:
        """
        Parse a line and index whatever it holds
        :param line: One line of the dump
        :return: Number of index entries written
        """
        self.stats.lines += 1
        record = parse_line(line)
        if record is None:
            if line.strip(" \t[],"):
                self.stats.parse_failures += 1
            return 0

        set_code = record.get("set")
        if not isinstance(set_code, str) or set_code not in self.allowed_sets:
            self.stats.excluded += 1
            return 0

        if not is_indexable(record):
            LOGGER.debug(f"Skipping record with unusable name, language or number: {line[:80]}")
            self.stats.parse_failures += 1
            return 0

        # Every entry of a card is built before any is inserted
        entries = list(expand_record(record))
        for entry in entries:
            self.index.insert(*entry)
        registered = len(entries)

        self.stats.registered += registered
        return registered
