"""Base classes for parser and renderer options.

This module defines the foundation classes for the option objects threaded
through parsing and rendering. Option objects are frozen so a single
configured instance can be shared by concurrent render calls.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Iterable

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdfmt.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def validate_choice(option_name: str, value: Any, choices: Iterable[Any]) -> None:
    """Raise InvalidOptionsError if ``value`` is not one of ``choices``."""
    allowed = tuple(choices)
    if value not in allowed:
        raise InvalidOptionsError(option_name, value, choices=allowed)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate option values. Subclasses extend this."""
