"""Scryfall provider for MTGMETA."""

from .bulk import ScryfallBulkProvider

__all__ = ["ScryfallBulkProvider"]
