"""
Installed MTGA cards snapshot, used to spot sets missing from the tables
"""
import collections
import json
import logging
import pathlib
from typing import Dict, Mapping, Optional, Tuple

from .. import constants, metadata_constants

LOGGER = logging.getLogger(__name__)


class InstalledCardsProvider:
    """
    Reads the cards.json MTGA Tool keeps alongside its other external data
    """

    file_path: pathlib.Path
    set_names: Mapping[str, str]

    def __init__(
        self,
        file_path: Optional[pathlib.Path] = None,
        set_names: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.file_path = file_path or constants.INSTALLED_CARDS_FILE
        self.set_names = (
            set_names if set_names is not None else metadata_constants.SET_NAMES
        )

    def count_cards_per_set(self) -> Dict[str, int]:
        """
        Count installed cards by set, in order of first appearance
        :return: Set code -> number of cards
        """
        with self.file_path.open(encoding="utf-8") as file:
            cards = json.load(file)

        set_counts: Dict[str, int] = collections.Counter()
        for card in cards:
            set_code = card.get("set")
            if not isinstance(set_code, str):
                continue
            set_counts[set_code] += 1

        return dict(set_counts)

    def check_sets_available(self) -> Dict[str, Tuple[int, bool]]:
        """
        Log every installed set and whether it has a known name
        :return: Set code -> (card count, known)
        """
        results: Dict[str, Tuple[int, bool]] = {}
        for set_code, count in self.count_cards_per_set().items():
            known = set_code in self.set_names
            if known:
                LOGGER.info(f"{set_code} - Ok! ({count} cards)")
            else:
                LOGGER.warning(f"{set_code} - Not added. ({count} cards)")
            results[set_code] = (count, known)

        return results
