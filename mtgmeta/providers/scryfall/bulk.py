"""
Scryfall all-cards dump downloader
"""
import logging
import pathlib
from typing import Any, Dict, Optional, Union

import ratelimit
from singleton_decorator import singleton

from ... import constants
from ...mtgmeta_config import MtgmetaConfig
from ...providers.abstract import AbstractProvider
from ...utils import to_megabytes

LOGGER = logging.getLogger(__name__)


@singleton
class ScryfallBulkProvider(AbstractProvider):
    """
    Scryfall bulk data container
    """

    BULK_DATA_URL: str = "https://api.scryfall.com/bulk-data"
    BULK_TYPE: str = "all_cards"
    DOWNLOAD_CHUNK_SIZE: int = 1024 * 1024
    destination: pathlib.Path

    def __init__(self, destination: Optional[pathlib.Path] = None) -> None:
        super().__init__(self._build_http_header())
        self.destination = destination or constants.EXTERNAL_PATH.joinpath(
            constants.SCRYFALL_FILE
        )

    def _build_http_header(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    @ratelimit.sleep_and_retry
    @ratelimit.limits(calls=10, period=1)
    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download JSON content from Scryfall
        :param url: URL to download from
        :param params: Options for URL download
        """
        response = self.session.get(url, params=params)
        self.log_download(response)
        response.raise_for_status()
        return response.json()

    def get_bulk_download_url(self) -> str:
        """
        Find where the all-cards dump currently lives.
        A configured [Scryfall] bulk_url takes priority.
        :return: Download URL
        """
        if MtgmetaConfig().has_option("Scryfall", "bulk_url"):
            return MtgmetaConfig().get("Scryfall", "bulk_url")

        bulk_data = self.download(self.BULK_DATA_URL)
        for item in bulk_data.get("data", []):
            if item.get("type") == self.BULK_TYPE:
                return str(item["download_uri"])

        LOGGER.warning(
            f"Bulk type {self.BULK_TYPE} not listed, falling back to {constants.SCRYFALL_FILE_URL}"
        )
        return constants.SCRYFALL_FILE_URL

    def download_to_file(self, url: str, destination: pathlib.Path) -> pathlib.Path:
        """
        Stream a large file to disk. The file only appears under its
        final name once the download completes.
        :param url: File URL
        :param destination: Where to save it
        :return: Saved file
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        partial_file = destination.with_name(destination.name + ".part")

        downloaded = 0
        with self.session.get(url, stream=True) as response:
            self.log_download(response)
            response.raise_for_status()
            with partial_file.open("wb") as file:
                for chunk in response.iter_content(chunk_size=self.DOWNLOAD_CHUNK_SIZE):
                    file.write(chunk)
                    downloaded += len(chunk)
                    LOGGER.debug(f"Downloading {destination.name}:\t {to_megabytes(downloaded)}")

        partial_file.replace(destination)
        LOGGER.info(f"Downloaded {destination.name} ({to_megabytes(downloaded)})")
        return destination

    def ensure_downloaded(self, force: bool = False) -> pathlib.Path:
        """
        Make sure the all-cards dump is on disk
        :param force: Download even if a copy exists
        :return: Dump location
        """
        if self.destination.is_file() and not force:
            LOGGER.info("Skipping Scryfall cards data download.")
            return self.destination

        LOGGER.info("Downloading Scryfall cards data.")
        return self.download_to_file(self.get_bulk_download_url(), self.destination)
