"""
Kvopts Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from typing import Sequence

from kvopts.console import console
from kvopts.exceptions import KvOptsError
from kvopts.logger import logger
from kvopts.option_parser import OptionParser
from kvopts.utils import setup_logging


def get_parser() -> OptionParser:
    parser = OptionParser(description="kvopts demo application")
    parser.add_argument("-c", "--count", "to get the count", mandatory=True)
    parser.add_argument("-l", "--logfile", "log file path", "/home/")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    parser = get_parser()
    try:
        parser.parse_argv(sys.argv if argv is None else argv)
        if parser.need_help():
            parser.render_help(console)
            return 0
        count = parser.retrieve_or_fail("count", int)
    except KvOptsError as error:
        logger.debug("Demo failed: %s", error)
        console.print(f"error: {error}", style="kvopts.error", markup=False)
        return 1

    console.print(f"App name: {parser.app_path}", markup=False)
    console.print(f"Count: {count}", markup=False)
    console.print(f"log file path: {parser.retrieve_or_fail('l')}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
