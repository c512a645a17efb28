"""
MTGMETA Arg Parser to determine what actions to take
"""

import argparse
import logging
import os
from typing import List, Optional

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to spawn up
    MTGMETA and complete the request.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("mtgmeta")

    parser.add_argument(
        "--use-envvars",
        action="store_true",
        help="Use environment variables over parser flags for build operations",
    )
    parser.add_argument(
        "--scryfall-file",
        "-f",
        type=str,
        metavar="PATH",
        default=None,
        help="Scryfall all-cards dump to read instead of the one in the app data folder.",
    )
    parser.add_argument(
        "--force-download",
        "-d",
        action="store_true",
        help="Download the Scryfall all-cards dump even if a copy exists.",
    )
    parser.add_argument(
        "--skip-ranks",
        "-SR",
        action="store_true",
        help="Do not download draft ranks spreadsheets.",
    )
    parser.add_argument(
        "--skip-metagame",
        "-SM",
        action="store_true",
        help="Do not download metagame statistics.",
    )
    parser.add_argument(
        "--skip-sets-check",
        "-SC",
        action="store_true",
        help="Do not compare the installed cards snapshot against the known sets.",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )

    parsed_args = parser.parse_args(argv)

    if parsed_args.use_envvars:
        LOGGER.info("Using environment variables over parser flags")
        parsed_args.scryfall_file = os.environ.get("SCRYFALL_FILE") or None
        parsed_args.force_download = bool(os.environ.get("FORCE_DOWNLOAD", False))
        parsed_args.skip_ranks = bool(os.environ.get("SKIP_RANKS", False))
        parsed_args.skip_metagame = bool(os.environ.get("SKIP_METAGAME", False))
        parsed_args.skip_sets_check = bool(os.environ.get("SKIP_SETS_CHECK", False))
        parsed_args.pretty = bool(os.environ.get("PRETTY", False))

    return parsed_args
