"""Pytest configuration and fixtures for MTGMETA tests."""

import json
import pathlib
from typing import Any, Callable, Dict, Generator, Iterable

import pytest
import responses


def make_card(
    name: str = "Shock",
    set_code: str = "m20",
    lang: str = "en",
    collector_number: str = "1",
    layout: str = "normal",
    **extra: Any,
) -> Dict[str, Any]:
    """Build a minimal Scryfall card object."""
    card = {
        "object": "card",
        "name": name,
        "set": set_code,
        "lang": lang,
        "collector_number": collector_number,
        "layout": layout,
    }
    card.update(extra)
    return card


def dump_lines(cards: Iterable[Dict[str, Any]]) -> str:
    """Render cards the way the all-cards dump does: a JSON array, one card per line."""
    body = ",\n".join(json.dumps(card, ensure_ascii=False) for card in cards)
    return f"[\n{body}\n]\n"


@pytest.fixture
def card_factory() -> Callable[..., Dict[str, Any]]:
    return make_card


@pytest.fixture
def write_dump(tmp_path: pathlib.Path) -> Callable[[str], pathlib.Path]:
    """Write dump text to a temporary file and hand back its path."""

    def _write(content: str, name: str = "scryfall-all-cards.json") -> pathlib.Path:
        file_path = tmp_path / name
        file_path.write_bytes(content.encode("utf-8"))
        return file_path

    return _write


@pytest.fixture(autouse=True)
def reset_provider_singletons() -> Generator[None, None, None]:
    """Reset provider singletons so every test gets a fresh session."""
    from mtgmeta.providers import (
        MetagameProvider,
        RanksSheetProvider,
        ScryfallBulkProvider,
    )

    providers = (MetagameProvider, RanksSheetProvider, ScryfallBulkProvider)
    for provider in providers:
        provider._instance = None
    yield
    for provider in providers:
        provider._instance = None


@pytest.fixture
def mocked_responses() -> Generator[responses.RequestsMock, None, None]:
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def dump_text() -> Callable[[Iterable[Dict[str, Any]]], str]:
    return dump_lines
