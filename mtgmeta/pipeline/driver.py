"""
Streaming build of the Scryfall card index
"""
import codecs
import logging
import pathlib
from typing import BinaryIO, Iterable, Optional

from ..mtgmeta_config import MtgmetaConfig
from .card_index import CardIndex
from .line_buffer import LineBuffer
from .normalizer import RecordNormalizer
from .progress import ProgressReporter

LOGGER = logging.getLogger(__name__)

CHUNK_SIZE: int = 64 * 1024


def build_card_index(
    source: BinaryIO,
    total_size: int,
    allowed_sets: Iterable[str],
    single_art_sets: Iterable[str],
    chunk_size: int = CHUNK_SIZE,
) -> CardIndex:
    """
    Read a line-per-card dump chunk by chunk and index it.
    Only one partial line is ever held in memory besides the index itself.
    :param source: Binary stream of the dump
    :param total_size: Expected size in bytes, only used for progress
    :param allowed_sets: Scryfall set codes to keep
    :param single_art_sets: Scryfall set codes stored one record per name
    :param chunk_size: Bytes to read at a time
    :return: Completed card index
    """
    index = CardIndex(single_art_sets)
    normalizer = RecordNormalizer(index, allowed_sets)
    line_buffer = LineBuffer()
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    progress = ProgressReporter(total_size)

    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break

        progress.update(len(chunk))
        for line in line_buffer.feed(decoder.decode(chunk)):
            normalizer.process_line(line)

    for line in line_buffer.feed(decoder.decode(b"", final=True)):
        normalizer.process_line(line)
    for line in line_buffer.close():
        normalizer.process_line(line)

    progress.finish()
    LOGGER.info(
        f"Indexed {normalizer.stats.registered:,} entries from {normalizer.stats.lines:,} lines "
        f"({normalizer.stats.excluded:,} excluded, {normalizer.stats.parse_failures:,} unreadable)"
    )
    return index


def generate_scryfall_database(
    file_path: pathlib.Path,
    allowed_sets: Optional[Iterable[str]] = None,
    single_art_sets: Optional[Iterable[str]] = None,
) -> CardIndex:
    """
    Build the card index from a dump on disk
    :param file_path: Scryfall all-cards file
    :param allowed_sets: Defaults to the configured allow-list
    :param single_art_sets: Defaults to the configured no duplicate art sets
    :return: Completed card index
    """
    LOGGER.info(f"Processing Scryfall database {file_path}")

    if allowed_sets is None:
        allowed_sets = MtgmetaConfig().allowed_sets
    if single_art_sets is None:
        single_art_sets = MtgmetaConfig().single_art_sets

    # Missing or unreadable files raise here, before any indexing starts
    file_size = file_path.stat().st_size
    with file_path.open("rb") as file:
        return build_card_index(file, file_size, allowed_sets, single_art_sets)
