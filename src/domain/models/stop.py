from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Stop:
    """A surface or metro boarding point.

    `lines` keeps the source order of the comma-separated field, blanks included.
    """

    code: str
    description: str
    lines: tuple[str, ...]
    position: GeoPoint
