"""
End-to-end tests for mtgmeta/pipeline/driver.py
"""

import io
import json
import pathlib

import pytest

from mtgmeta.mtgmeta_config import MtgmetaConfig
from mtgmeta.pipeline import build_card_index, generate_scryfall_database

ALLOWED = {"abc", "eld", "pm20"}
SINGLE_ART = {"pm20"}


def run(text: str, chunk_size: int = 64 * 1024):
    raw = text.encode("utf-8")
    return build_card_index(io.BytesIO(raw), len(raw), ALLOWED, SINGLE_ART, chunk_size)


def test_only_allowed_sets_are_indexed():
    text = (
        '{"name":"Bolt","set":"abc","lang":"en","collector_number":"1","layout":"normal"}\n'
        '{"name":"Bolt","set":"zzz","lang":"en","collector_number":"1","layout":"normal"}\n'
    )

    index = run(text)

    assert [entry[:4] for entry in index.entries()] == [("EN", "abc", "Bolt", "1")]


def test_malformed_line_does_not_stop_ingestion():
    text = (
        '{"name":"Bolt","set":"abc","lang":"en","collector_number":"1","layout":"normal"}\n'
        '{"name": "Bolt"\n'
        '{"name":"Shock","set":"abc","lang":"en","collector_number":"2","layout":"normal"}\n'
    )

    index = run(text)

    assert ("EN", "abc", "Bolt", "1") in index
    assert ("EN", "abc", "Shock", "2") in index
    assert len(index) == 2


def test_final_line_without_terminator_is_indexed():
    text = '{"name":"Bolt","set":"abc","lang":"en","collector_number":"1","layout":"normal"}'

    assert ("EN", "abc", "Bolt", "1") in run(text)


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 64, 4096])
def test_chunk_size_does_not_change_the_index(chunk_size, card_factory, dump_text):
    cards = [
        card_factory(name="Brazen Borrower // Petty Theft", set_code="eld", collector_number="39",
                     layout="adventure", card_faces=[{"name": "Brazen Borrower"}, {"name": "Petty Theft"}]),
        card_factory(name="Décharge", set_code="eld", lang="fr", collector_number="120"),
        card_factory(name="稲妻", set_code="abc", lang="ja", collector_number="7"),
        card_factory(name="Forest", set_code="pm20", collector_number="280"),
        card_factory(name="Forest", set_code="pm20", collector_number="281"),
        card_factory(name="Shock", set_code="m19", collector_number="156"),
    ]
    text = dump_text(cards).replace("\n", "\r\n")

    expected = run(text).to_dict()
    index = run(text, chunk_size=chunk_size)

    assert index.to_dict() == expected
    assert len(index) == 6
    assert index.get("FR", "eld", "Décharge", "120")["lang"] == "FR"
    assert index.get("JA", "abc", "稲妻", "7") is not None
    assert index.get("EN", "pm20", "Forest")["collector_number"] == "281"


def test_generate_scryfall_database_reads_file(write_dump, card_factory, dump_text):
    file_path = write_dump(dump_text([card_factory(set_code="abc"), card_factory(set_code="no")]))

    index = generate_scryfall_database(file_path, allowed_sets=ALLOWED, single_art_sets=())

    assert len(index) == 1
    assert ("EN", "abc", "Shock", "1") in index


def test_generate_scryfall_database_uses_configured_sets(
    write_dump, card_factory, dump_text, monkeypatch
):
    config = MtgmetaConfig()
    monkeypatch.setattr(config, "allowed_sets", frozenset({"xyz"}))
    monkeypatch.setattr(config, "single_art_sets", frozenset({"xyz"}))
    file_path = write_dump(
        dump_text(
            [
                card_factory(set_code="xyz", collector_number="1"),
                card_factory(set_code="xyz", collector_number="2"),
                card_factory(set_code="abc"),
            ]
        )
    )

    index = generate_scryfall_database(file_path)

    assert index.to_dict() == {"EN": {"xyz": {"Shock": index.get("EN", "xyz", "Shock")}}}
    assert index.get("EN", "xyz", "Shock")["collector_number"] == "2"


def test_missing_file_raises(tmp_path: pathlib.Path):
    with pytest.raises(FileNotFoundError):
        generate_scryfall_database(tmp_path / "missing.json", allowed_sets=ALLOWED)


def test_progress_reaches_100(write_dump, card_factory, dump_text, caplog):
    file_path = write_dump(dump_text([card_factory(set_code="abc")] * 50))

    with caplog.at_level("INFO", logger="mtgmeta.pipeline.progress"):
        generate_scryfall_database(file_path, allowed_sets=ALLOWED, single_art_sets=())

    progress_messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "mtgmeta.pipeline.progress"
    ]
    assert progress_messages[-1] == "Progress:\t 100.00%"


def test_upstream_record_shape_is_kept(write_dump):
    card = {
        "name": "Bolt",
        "set": "abc",
        "lang": "en",
        "collector_number": "1",
        "layout": "normal",
        "image_uris": {"normal": "https://example.invalid/bolt.jpg"},
    }
    file_path = write_dump("[\n" + json.dumps(card) + "\n]\n")

    index = generate_scryfall_database(file_path, allowed_sets=ALLOWED, single_art_sets=())

    assert index.get("EN", "abc", "Bolt", "1") == {**card, "lang": "EN"}


@pytest.mark.parametrize(
    "corrupt_line",
    [
        '{"name":["Bolt"],"set":"abc","lang":"en","collector_number":"1","layout":"normal"}',
        '{"name":"Bolt","set":"abc","lang":"en","collector_number":{"n":1},"layout":"normal"}',
        '{"name":"Fire // Ice","set":"abc","lang":"en","collector_number":"3","layout":"split",'
        '"card_faces":[{"name":{"en":"Fire"}},{"name":"Ice"}]}',
        '{"name": ' + "[" * 100000 + "]" * 100000 + "}",
    ],
)
def test_corrupt_line_does_not_halt_ingestion(corrupt_line):
    good_line = '{"name":"Shock","set":"abc","lang":"en","collector_number":"9","layout":"normal"}'

    index = run(corrupt_line + "\n" + good_line + "\n")

    assert ("EN", "abc", "Shock", "9") in index
