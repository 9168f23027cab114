"""Connection settings and small comparison helpers shared by the API clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Config:
    """Credentials and endpoint used to talk to a GitLab instance.

    An empty ``base_url`` means the public GitLab endpoint.
    """

    token: str
    base_url: str = ""


def late_initialize(current: Optional[T], observed: Optional[T]) -> Optional[T]:
    """Return ``observed`` when ``current`` is unset and ``observed`` is non-empty.

    In every other case ``current`` is returned unchanged.
    """
    if current is None and observed is not None and observed != "":
        return observed
    return current


def optional_string(value: Optional[str]) -> Optional[str]:
    """Map an empty string to ``None``; return any other string unchanged."""
    if not value:
        return None
    return value


def bool_matches(expected: Optional[bool], actual: bool) -> bool:
    """Tell whether an optional desired flag agrees with the observed one.

    An unset desired value agrees with anything.
    """
    return expected is None or expected == actual


def int_matches(expected: Optional[int], actual: int) -> bool:
    """Tell whether an optional desired integer agrees with the observed one.

    An unset desired value agrees with anything.
    """
    return expected is None or expected == actual


def _drop_unset(fields: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` without the entries whose value is ``None``."""
    return {key: value for key, value in fields.items() if value is not None}