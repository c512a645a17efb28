"""
MTGMETA Main Executor
"""

import argparse
import logging
import pathlib
import traceback
from typing import Any, Dict, List, Optional

from mtgmeta import constants
from mtgmeta.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def dispatcher(args: argparse.Namespace) -> pathlib.Path:
    """
    MTGMETA Dispatcher
    :param args: Parsed command line
    :return: Hand-off file for the metadata generator
    """
    from mtgmeta.output_generator import MetadataBundle, write_to_file
    from mtgmeta.pipeline import generate_scryfall_database
    from mtgmeta.providers import (
        InstalledCardsProvider,
        MetagameProvider,
        RanksSheetProvider,
        ScryfallBulkProvider,
    )

    if not args.skip_sets_check:
        if constants.INSTALLED_CARDS_FILE.is_file():
            InstalledCardsProvider().check_sets_available()
        else:
            LOGGER.warning(
                f"{constants.INSTALLED_CARDS_FILE} not found, skipping sets check"
            )

    ranks_data: Dict[str, Dict[str, Any]] = {}
    if not args.skip_ranks:
        ranks_data = RanksSheetProvider().get_ranks_data()

    if args.scryfall_file:
        scryfall_file = pathlib.Path(args.scryfall_file).expanduser()
    else:
        scryfall_file = ScryfallBulkProvider().ensure_downloaded(args.force_download)

    metagame_data: Any = {}
    if not args.skip_metagame:
        metagame_data = MetagameProvider().get_metagame_data()

    bundle = MetadataBundle(
        cards=generate_scryfall_database(scryfall_file),
        ranks=ranks_data,
        metagame=metagame_data,
        version=constants.VERSION,
        languages=list(constants.LANGUAGES),
    )

    return write_to_file(
        file_name=f"metadata-bundle-v{bundle.version}",
        file_contents=bundle,
        pretty_print=args.pretty,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """
    MTGMETA safe main call
    """
    from mtgmeta.arg_parser import parse_args
    from mtgmeta.mtgmeta_config import MtgmetaConfig

    init_logger()
    args = parse_args(argv)
    MtgmetaConfig()

    LOGGER.info("Begin Metadata fetch.")
    LOGGER.info(
        f"Starting {MtgmetaConfig().metadata_version} on {constants.MTGMETA_BUILD_DATE}"
    )

    try:
        dispatcher(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        raise

    LOGGER.info("Goodbye!")


if __name__ == "__main__":
    main()
