"""
MTGA Tool metagame statistics provider
"""
import logging
from typing import Any, Dict, Optional, Union

from singleton_decorator import singleton

from .. import constants
from ..mtgmeta_config import MtgmetaConfig
from ..providers.abstract import AbstractProvider

LOGGER = logging.getLogger(__name__)


@singleton
class MetagameProvider(AbstractProvider):
    """
    Metagame API container
    """

    api_url: str

    def __init__(self) -> None:
        super().__init__(self._build_http_header())
        self.api_url = MtgmetaConfig().get(
            "Metagame", "api_url", fallback=constants.METAGAME_URL
        )

    def _build_http_header(self) -> Dict[str, str]:
        return {}

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download content from the metagame API
        Api calls always return JSON
        :param url: URL to download from
        :param params: Options for URL download
        """
        response = self.session.get(url, params=params)
        self.log_download(response)
        response.raise_for_status()
        return response.json()

    def get_metagame_data(self) -> Any:
        """
        Current metagame snapshot
        :return: Decoded metagame payload
        """
        LOGGER.info("Download metagame data.")
        return self.download(self.api_url or constants.METAGAME_URL)
