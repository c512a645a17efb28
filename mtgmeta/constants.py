"""
MTGMETA Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib
from typing import List

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("mtgmeta").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("mtgmeta.properties")

# Where MTGA Tool keeps its application data
APPDATA: pathlib.Path = (
    pathlib.Path(os.environ.get("MTGMETA_APPDATA", "~/.config/mtgatool"))
    .expanduser()
    .resolve()
)
EXTERNAL_PATH: pathlib.Path = APPDATA.joinpath("external")
INSTALLED_CARDS_FILE: pathlib.Path = EXTERNAL_PATH.joinpath("cards.json")

ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("MTGMETA_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)
LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("mtgmeta_logs")
CACHE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath(".mtgmeta_cache")

MTGMETA_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

VERSION: int = 26

LANGUAGES: List[str] = [
    "EN",
    "ES",
    "BR",
    "DE",
    "FR",
    "IT",
    "JP",
    "RU",
    "ko-KR",
    "zh-CN",
]

# Contains cards in all languages, 800+ MB
SCRYFALL_FILE: str = "scryfall-all-cards.json"
SCRYFALL_FILE_URL: str = "https://archive.scryfall.com/json/" + SCRYFALL_FILE

RANKS_SHEET_URL: str = (
    "https://docs.google.com/spreadsheets/d/{sheet}/gviz/tq?sheet={page}"
)
METAGAME_URL: str = "https://mtgatool.com/database/metagame.php"

# Scryfall layouts whose faces are indexed under their own names
MULTI_FACE_LAYOUTS = frozenset({"split", "transform", "adventure"})
