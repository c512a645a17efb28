"""Tests for the installed cards snapshot check."""

import json
import logging
import pathlib

import pytest

from mtgmeta.providers import InstalledCardsProvider


@pytest.fixture
def cards_file(tmp_path: pathlib.Path) -> pathlib.Path:
    cards = [
        {"id": 1, "set": "ELD"},
        {"id": 2, "set": "ELD"},
        {"id": 3, "set": "THB"},
        {"id": 4, "set": "M20"},
        {"id": 5, "set": "ELD"},
    ]
    file_path = tmp_path / "cards.json"
    file_path.write_text(json.dumps(cards), encoding="utf-8")
    return file_path


def test_count_cards_per_set(cards_file):
    provider = InstalledCardsProvider(cards_file, set_names={})

    assert provider.count_cards_per_set() == {"ELD": 3, "THB": 1, "M20": 1}


def test_check_sets_available_flags_unknown_sets(cards_file, caplog):
    provider = InstalledCardsProvider(
        cards_file, set_names={"ELD": "Throne of Eldraine", "M20": "Core Set 2020"}
    )

    with caplog.at_level(logging.INFO, logger="mtgmeta.providers.installed_cards"):
        results = provider.check_sets_available()

    assert results == {"ELD": (3, True), "THB": (1, False), "M20": (1, True)}
    messages = [record.getMessage() for record in caplog.records]
    assert "ELD - Ok! (3 cards)" in messages
    assert "THB - Not added. (1 cards)" in messages


def test_missing_snapshot_raises(tmp_path: pathlib.Path):
    with pytest.raises(FileNotFoundError):
        InstalledCardsProvider(tmp_path / "cards.json").check_sets_available()


def test_entries_without_set_are_ignored(tmp_path: pathlib.Path):
    file_path = tmp_path / "cards.json"
    file_path.write_text(
        json.dumps([{"id": 1, "set": "ELD"}, {"id": 2}, {"id": 3, "set": None}]),
        encoding="utf-8",
    )

    provider = InstalledCardsProvider(file_path, set_names={"ELD": "Throne of Eldraine"})

    assert provider.count_cards_per_set() == {"ELD": 1}
    assert provider.check_sets_available() == {"ELD": (1, True)}
