#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/formatters.py
"""Pluggable formatters for fenced code block contents.

A code formatter is any callable taking the literal code of a fenced block
and returning the reformatted code. Formatters are looked up by the first
word of the block's info string, so a block opened with ```` ```go ```` is
passed to whatever is registered under ``"go"``.

Formatters are expected to hand back their input unchanged when they cannot
process it. The renderer additionally guards every call: an exception raised
by a formatter is logged and the original code is emitted.

Examples
--------
    >>> registry = CodeFormatterRegistry()
    >>> registry.register("shout", str.upper)
    >>> apply_code_formatter(registry.as_mapping(), "shout", "hi\\n")
    'HI\\n'

"""

from __future__ import annotations

import logging
import subprocess
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from mdfmt.constants import GOFMT_EXECUTABLE, GOFMT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

CodeFormatter = Callable[[str], str]


def format_go(source: str) -> str:
    """Reformat Go source with the ``gofmt`` executable.

    Source fragments (declarations or statements without a package clause)
    are accepted, as ``gofmt`` does for standard input.

    Parameters
    ----------
    source : str
        Go source code

    Returns
    -------
    str
        The formatted code, or ``source`` unchanged when it is empty, when
        ``gofmt`` is not installed, times out, or rejects the code

    """
    if not source:
        return source

    try:
        result = subprocess.run(
            [GOFMT_EXECUTABLE],
            input=source,
            capture_output=True,
            text=True,
            timeout=GOFMT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("gofmt could not be run: %s", e)
        return source

    if result.returncode != 0:
        logger.debug("gofmt rejected code block: %s", result.stderr.strip())
        return source

    return result.stdout


GO_CODE_FORMATTERS: Mapping[str, CodeFormatter] = MappingProxyType({"go": format_go, "Go": format_go})


def default_code_formatters() -> dict[str, CodeFormatter]:
    """Return a fresh copy of the default formatter map (Go only)."""
    return dict(GO_CODE_FORMATTERS)


def formatter_key(info: str | None) -> str:
    """Return the registry key for a code block info string.

    The key is the first whitespace-delimited word after stripping
    surrounding whitespace and a single leading ``.``.

        >>> formatter_key(" .go  {linenos=true}")
        'go'

    """
    if not info:
        return ""
    info = info.strip()
    if info.startswith("."):
        info = info[1:]
    parts = info.split(maxsplit=1)
    return parts[0] if parts else ""


def apply_code_formatter(formatters: Mapping[str, CodeFormatter], info: str | None, code: str) -> str:
    """Run the formatter registered for ``info`` over ``code``.

    Parameters
    ----------
    formatters : Mapping[str, CodeFormatter]
        Language name to formatter map
    info : str or None
        Info string of the fenced code block
    code : str
        Literal code lines

    Returns
    -------
    str
        Formatted code with a trailing newline ensured, or ``code`` untouched
        when no formatter matches or the formatter raised

    """
    key = formatter_key(info)
    formatter = formatters.get(key) if key else None
    if formatter is None:
        return code

    try:
        formatted = formatter(code)
    except Exception as e:
        logger.warning("Code formatter for %r failed, keeping original code block: %s", key, e)
        return code

    if not isinstance(formatted, str):
        logger.warning("Code formatter for %r returned %s, keeping original code block", key, type(formatted).__name__)
        return code

    if formatted and not formatted.endswith("\n"):
        formatted += "\n"
    return formatted


class CodeFormatterRegistry:
    """Mutable name to formatter registry used to build render options.

    Parameters
    ----------
    formatters : Mapping[str, CodeFormatter], optional
        Initial entries

    """

    def __init__(self, formatters: Mapping[str, CodeFormatter] | None = None) -> None:
        """Initialize the registry with optional initial entries."""
        self._formatters: dict[str, CodeFormatter] = dict(formatters or {})

    def register(self, name: str, formatter: CodeFormatter) -> None:
        """Register ``formatter`` under ``name``, replacing any previous entry."""
        if not name or name != name.strip():
            raise ValueError(f"Formatter name must be a non-empty word, got {name!r}")
        if not callable(formatter):
            raise TypeError(f"Formatter for {name!r} must be callable")
        self._formatters[name] = formatter

    def unregister(self, name: str) -> None:
        """Remove the formatter registered under ``name``."""
        self._formatters.pop(name, None)

    def update(self, formatters: Mapping[str, CodeFormatter]) -> None:
        """Register every entry of ``formatters``."""
        for name, formatter in formatters.items():
            self.register(name, formatter)

    def get(self, name: str) -> CodeFormatter | None:
        """Return the formatter registered under ``name`` or None."""
        return self._formatters.get(name)

    def names(self) -> list[str]:
        """Return registered names in registration order."""
        return list(self._formatters)

    def as_mapping(self) -> Mapping[str, CodeFormatter]:
        """Return a read-only snapshot suitable for render options."""
        return MappingProxyType(dict(self._formatters))

    def copy(self) -> CodeFormatterRegistry:
        """Return an independent copy of this registry."""
        return CodeFormatterRegistry(self._formatters)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)
