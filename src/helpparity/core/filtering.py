"""Common-parameter filter.

Framework-injected parameters (verbosity, error handling, confirmation and
the like) are not part of a command's authored contract. They are removed
from both the registry side and the documentation side before comparison.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from helpparity.constants import EXCLUDED_PARAMETERS

T = TypeVar("T")


def _name_of(item: object) -> str:
    if isinstance(item, str):
        return item
    return str(getattr(item, "name"))


def exclude(
    parameters: Iterable[T],
    excluded_names: Iterable[str] = EXCLUDED_PARAMETERS,
) -> list[T]:
    """Drop parameters whose name is in ``excluded_names``.

    Matching is case-insensitive and order is preserved. Items may be plain
    names or anything with a ``name`` attribute. Idempotent.
    """
    excluded = {name.casefold() for name in excluded_names}
    return [item for item in parameters if _name_of(item).casefold() not in excluded]
