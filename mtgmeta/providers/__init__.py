"""
Provider Dispatcher
"""

from .installed_cards import InstalledCardsProvider
from .metagame import MetagameProvider
from .ranks import RanksSheetProvider
from .scryfall.bulk import ScryfallBulkProvider

__all__ = [
    "InstalledCardsProvider",
    "MetagameProvider",
    "RanksSheetProvider",
    "ScryfallBulkProvider",
]
