import sys
import logging
import dataclasses as dt

from typing import Iterable, Optional, Sequence, Union
from . import const, utils

_logger = logging.getLogger(__name__)

KeyOrKeys = Union[str, Iterable[str]]
OptionItems = tuple[tuple[str, tuple[str, ...]], ...]

# --- Errors ----------------------------------------------------------------- #


class ArgxError(Exception):
    pass


class IndexOutOfRange(ArgxError, IndexError):
    pass


class KeyNotFound(ArgxError, KeyError):
    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


# --- Result ----------------------------------------------------------------- #


@dt.dataclass(frozen=True)
class ParseResult:
    """
    Read-only view over a classified command line.

    Holds the positional arguments, the options (each key paired with its
    values in order of appearance) and the flags. Instances are built by
    `parse` and never change afterwards.

    Attributes:
        argList: The positional arguments.
        optList: `(key, values)` pairs, one per distinct key. A mapping is
            accepted too and converted.
        flagList: The flags, duplicates included.
    """

    argList: tuple[str, ...] = ()
    optList: OptionItems = ()
    flagList: tuple[str, ...] = ()

    def __post_init__(self):
        opts = dict(self.optList)
        object.__setattr__(self, "argList", tuple(self.argList))
        object.__setattr__(
            self, "optList", tuple((key, tuple(values)) for key, values in opts.items())
        )
        object.__setattr__(self, "flagList", tuple(self.flagList))

    def _lookup(self, key: str) -> Optional[tuple[str, ...]]:
        for k, values in self.optList:
            if k == key:
                return values
        return None

    # --- Arguments --- #

    def argumentCount(self) -> int:
        return len(self.argList)

    def argumentAt(self, index: int) -> str:
        """
        Returns the positional argument at `index`.

        Raises:
            IndexOutOfRange: if there is no argument at `index`.
        """
        if index < 0 or index >= len(self.argList):
            raise IndexOutOfRange(f"Argument index out of range: {index}")
        return self.argList[index]

    def argumentAtOrDefault(self, index: int, fallback: str) -> str:
        if index < 0 or index >= len(self.argList):
            return fallback
        return self.argList[index]

    def arguments(self) -> list[str]:
        return list(self.argList)

    # --- Options --- #

    def optionCount(self) -> int:
        return len(self.optList)

    def hasOption(self, key: str) -> bool:
        return self._lookup(key) is not None

    def _firstValue(self, keys: list[str]) -> Optional[str]:
        for key in keys:
            values = self._lookup(key)
            if values:
                return values[0]
        return None

    def optionValue(self, keyOrKeys: KeyOrKeys) -> str:
        """
        Returns the first value of an option.

        Args:
            keyOrKeys: A key, or candidate keys tried in order
                (e.g. `["o", "output"]`). The first candidate holding a
                value wins.

        Raises:
            KeyNotFound: if no candidate holds a value.
        """
        keys = utils.asList(keyOrKeys)
        value = self._firstValue(keys)
        if value is not None:
            return value
        if any(self.hasOption(key) for key in keys):
            raise KeyNotFound(f"Option has no value: {', '.join(keys)}")
        raise KeyNotFound(f"Option not found: {', '.join(keys)}")

    def optionValueOrDefault(self, keyOrKeys: KeyOrKeys, fallback: str) -> str:
        value = self._firstValue(utils.asList(keyOrKeys))
        if value is None:
            return fallback
        return value

    def optionValues(self, keyOrKeys: KeyOrKeys) -> list[str]:
        """Returns the values of every matching key, concatenated in candidate order."""
        result: list[str] = []
        for key in utils.asList(keyOrKeys):
            result.extend(self._lookup(key) or ())
        return result

    def options(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self.optList}

    # --- Flags --- #

    def flagCount(self) -> int:
        return len(self.flagList)

    def hasFlag(self, name: str) -> bool:
        return name in self.flagList

    def flags(self) -> list[str]:
        return list(self.flagList)


# --- Builder ---------------------------------------------------------------- #


@dt.dataclass
class Builder:
    args: list[str] = dt.field(default_factory=list)
    opts: dict[str, list[str]] = dt.field(default_factory=dict)
    flags: list[str] = dt.field(default_factory=list)

    def arg(self, arg: str):
        self.args.append(arg)

    def option(self, key: str, value: Optional[str] = None):
        values = self.opts.setdefault(key, [])
        if value is not None:
            values.append(value)

    def flag(self, flag: str):
        self.flags.append(flag)

    def build(self) -> ParseResult:
        opts = tuple((key, tuple(values)) for key, values in self.opts.items())
        return ParseResult(tuple(self.args), opts, tuple(self.flags))


# --- Parser ----------------------------------------------------------------- #


def prefixLength(token: str) -> int:
    """Counts the leading dashes of a token."""
    return len(token) - len(token.lstrip("-"))


def parse(
    tokens: Sequence[str],
    skipProgram: bool = const.SKIP_PROGRAM,
    resetOnDashes: bool = const.RESET_ON_DASHES,
) -> ParseResult:
    """
    Classifies command-line tokens into arguments, options and flags.

    `-key` starts an option and the next bare token becomes its value,
    `--name` (or more dashes) is a flag, anything else is an argument.
    An option takes at most one value per occurrence, repeat the key to
    give it more. Tokens made only of dashes are ignored.

    Args:
        tokens: The tokens to classify.
        skipProgram: Drop the first token (the program name).
        resetOnDashes: Let a dash-only token cancel a pending option key.
    """
    result = Builder()
    pending: Optional[str] = None

    if skipProgram:
        tokens = tokens[1:]

    for token in tokens:
        dashes = prefixLength(token)
        content = token[dashes:]

        if not content:
            _logger.debug(f"Ignoring '{token}'")
            if resetOnDashes and pending is not None:
                result.option(pending)
                pending = None
        elif dashes >= 2:
            if pending is not None:
                result.option(pending)
                pending = None
            _logger.debug(f"Flag '{content}'")
            result.flag(content)
        elif dashes == 1:
            if pending is not None:
                result.option(pending)
            _logger.debug(f"Option '{content}'")
            result.option(content)
            pending = content
        elif pending is not None:
            _logger.debug(f"Value '{content}' for option '{pending}'")
            result.option(pending, content)
            pending = None
        else:
            _logger.debug(f"Argument '{content}'")
            result.arg(content)

    if pending is not None:
        result.option(pending)

    return result.build()


def parseArgv(argv: Optional[Sequence[str]] = None) -> ParseResult:
    """Parses the command line of the running program, without its name."""
    if argv is None:
        argv = sys.argv
    return parse(argv, skipProgram=True)
