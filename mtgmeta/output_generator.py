"""
Hand-off of the merged sources to the metadata generator
"""
import dataclasses
import json
import logging
import pathlib
from typing import Any, Dict, List, Optional

from . import constants
from .mtgmeta_config import MtgmetaConfig
from .pipeline import CardIndex

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass
class MetadataBundle:
    """
    Everything the metadata generator consumes for one build
    """

    cards: CardIndex
    ranks: Dict[str, Dict[str, Any]] = dataclasses.field(default_factory=dict)
    metagame: Any = dataclasses.field(default_factory=dict)
    version: int = constants.VERSION
    languages: List[str] = dataclasses.field(
        default_factory=lambda: list(constants.LANGUAGES)
    )

    def to_json(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "languages": self.languages,
            "ranks": self.ranks,
            "metagame": self.metagame,
            "cards": self.cards.to_dict(),
        }


def build_meta() -> Dict[str, str]:
    return {
        "date": constants.MTGMETA_BUILD_DATE,
        "version": MtgmetaConfig().metadata_version,
    }


def write_to_file(
    file_name: str,
    file_contents: Any,
    pretty_print: bool,
    output_path: Optional[pathlib.Path] = None,
) -> pathlib.Path:
    """
    Dump content to a file in the outputs directory
    :param file_name: File to dump to, without extension
    :param file_contents: Contents to dump
    :param pretty_print: Pretty or minimal
    :param output_path: Directory to write into, defaults to the configured one
    :return: Written file
    """
    write_file = (output_path or MtgmetaConfig().output_path).joinpath(
        f"{file_name}.json"
    )
    write_file.parent.mkdir(parents=True, exist_ok=True)

    with write_file.open("w", encoding="utf-8") as file:
        json.dump(
            obj={"meta": build_meta(), "data": file_contents},
            fp=file,
            indent=(4 if pretty_print else None),
            ensure_ascii=False,
            default=lambda o: o.to_json(),
        )

    LOGGER.info(f"Wrote {write_file}")
    return write_file
