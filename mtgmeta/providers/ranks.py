"""
Draft ranks from published Google Sheets
"""
import json
import logging
from typing import Any, Dict, List, Optional, Union

from singleton_decorator import singleton

from .. import constants, metadata_constants
from ..providers.abstract import AbstractProvider

LOGGER = logging.getLogger(__name__)

RANK_COLUMN: int = 4
CONT_COLUMN: int = 5
VALUE_COLUMNS = range(9, 22)
GVIZ_CALLBACK: str = "google.visualization.Query.setResponse("


def strip_gviz_wrapper(response_text: str) -> str:
    """
    The gviz endpoint answers with JSONP, cut it back down to JSON
    :param response_text: Raw body
    :return: JSON text
    """
    text = response_text.replace("/*O_o*/", "", 1).strip()
    if text.startswith(GVIZ_CALLBACK):
        text = text[len(GVIZ_CALLBACK) :]
    if text.endswith(");"):
        text = text[:-2]
    return text.strip()


def _cell_value(row: Dict[str, Any], column: int) -> Any:
    cells = row.get("c") or []
    if column >= len(cells) or not cells[column]:
        return None
    return cells[column].get("v")


def process_ranks_data(sheet_json: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """
    Convert a sheet table into ranks keyed by card name
    :param sheet_json: Decoded gviz response
    :return: Card name -> {rank, cont, values}
    """
    ranks: Dict[str, Dict[str, Any]] = {}
    for row in sheet_json["table"]["rows"]:
        name = _cell_value(row, 0)
        if not name:
            continue

        ranks[name] = {
            "rank": _cell_value(row, RANK_COLUMN),
            "cont": _cell_value(row, CONT_COLUMN),
            "values": [_cell_value(row, column) for column in VALUE_COLUMNS],
        }

    return ranks


@singleton
class RanksSheetProvider(AbstractProvider):
    """
    Google Sheets ranks container
    """

    sheets: List[Dict[str, str]]

    def __init__(self, sheets: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(self._build_http_header())
        self.sheets = (
            sheets if sheets is not None else metadata_constants.RANKS_SHEETS
        )

    def _build_http_header(self) -> Dict[str, str]:
        return {}

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> Any:
        """
        Download a sheet page
        :param url: gviz URL
        :param params: Options for URL download
        :return: Response body, as text
        """
        response = self.session.get(url, params=params)
        self.log_download(response)
        response.raise_for_status()
        return response.text

    def get_set_ranks(self, set_code: str, sheet: str, page: str) -> Dict[str, Any]:
        """
        Download and decode the ranks of one set
        :param set_code: Set code the sheet belongs to
        :param sheet: Spreadsheet ID
        :param page: Sheet page name
        :return: Card name -> rank data
        """
        LOGGER.info(f"Get {set_code.upper()} ranks data.")
        body = self.download(constants.RANKS_SHEET_URL.format(sheet=sheet, page=page))
        return process_ranks_data(json.loads(strip_gviz_wrapper(body)))

    def get_ranks_data(self) -> Dict[str, Dict[str, Any]]:
        """
        Ranks of every configured set. A sheet that can't be
        downloaded or read is left out of the results.
        :return: Upper set code -> card name -> rank data
        """
        ranks_data: Dict[str, Dict[str, Any]] = {}
        for rank_sheet in self.sheets:
            set_code = rank_sheet["setCode"].upper()
            try:
                ranks_data[set_code] = self.get_set_ranks(
                    set_code, rank_sheet["sheet"], rank_sheet["page"]
                )
            except (OSError, ValueError, KeyError, TypeError) as error:
                LOGGER.warning(f"Unable to load {set_code} ranks: {error}")
                continue

            LOGGER.info(f"{set_code} ok.")

        return ranks_data
