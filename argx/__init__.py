import os
import sys
import logging

from typing import Optional, Sequence

from . import const, dump, vt100
from .args import (
    ArgxError,
    Builder,
    IndexOutOfRange,
    KeyNotFound,
    ParseResult,
    parse,
    parseArgv,
    prefixLength,
)

__all__ = [
    "ArgxError",
    "Builder",
    "IndexOutOfRange",
    "KeyNotFound",
    "ParseResult",
    "parse",
    "parseArgv",
    "prefixLength",
    "main",
]

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(result: ParseResult):
        if result.hasFlag("verbose"):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def _argv(argv: Optional[Sequence[str]]) -> list[str]:
    if argv is None:
        argv = sys.argv[1:]
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    return (extra.split() if extra else []) + list(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        tokens = _argv(argv)
        # The program name is already gone, classify everything left.
        result = parse(tokens)
        logger.setup(result)
        if result.hasFlag("verbose"):
            # Classify again so the decisions reach the debug log
            result = parse(tokens)
        _logger.debug(f"Parsed {len(tokens)} tokens: {result!r}")

        if result.hasFlag("version"):
            print(f"{const.ARGV0} v{const.VERSION_STR}")
            return 0

        dump.dump(result)
        return 0

    except ArgxError as e:
        logging.exception(e)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
