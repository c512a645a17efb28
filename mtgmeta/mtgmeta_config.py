"""
MTGMETA Configuration Service
"""

import configparser
import logging
import pathlib
from typing import FrozenSet, Iterable, Optional

from singleton_decorator import singleton

from . import constants, metadata_constants


@singleton
class MtgmetaConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    metadata_version: str
    use_cache: bool
    output_path: pathlib.Path
    allowed_sets: FrozenSet[str]
    single_art_sets: FrozenSet[str]

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.__load_config_from_local_file(config_path or constants.CONFIG_PATH)

        try:
            self.metadata_version = self.config_parser.get("MTGMETA", "version")
        except (configparser.NoSectionError, configparser.NoOptionError):
            self.logger.warning(
                "Key 'version' is missing from Section 'MTGMETA' in config file"
            )
            self.metadata_version = f"{constants.VERSION}.X.X+{constants.MTGMETA_BUILD_DATE.replace('-', '')}"

        self.use_cache = self.get_boolean("MTGMETA", "use_cache", False)
        self.output_path = constants.ENV_OUT_PATH.joinpath(
            f"mtgmeta_build_{self.metadata_version}"
        )
        self.allowed_sets = self.__get_set_codes(
            "allowed_sets", metadata_constants.ALLOWED_SCRYFALL
        )
        self.single_art_sets = self.__get_set_codes(
            "no_dupes_art_sets", metadata_constants.NO_DUPES_ART_SETS
        )

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as MTGMETA configuration file
        :param file_path: Path to Configuration file
        """
        self.logger.info(f"Loading configuration from {file_path}")
        self.config_parser.read(str(file_path))

    def __get_set_codes(self, option: str, fallback: Iterable[str]) -> FrozenSet[str]:
        """
        Read a comma separated list of Scryfall set codes
        :param option: Key in the Scryfall section
        :param fallback: Set codes to use if the key is blank or missing
        :return Lower-case set codes
        """
        if not self.has_option("Scryfall", option):
            return frozenset(fallback)

        return frozenset(
            code.strip().lower()
            for code in self.get("Scryfall", option).split(",")
            if code.strip()
        )

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        return self.config_parser.get(section, option, fallback=fallback)

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def has_section(self, section: str) -> bool:
        """
        Check if Configuration has a specific section
        :param section: Section header to find
        :return Does Section header exist
        """
        return self.config_parser.has_section(section)

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
