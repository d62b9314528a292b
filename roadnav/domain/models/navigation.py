from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class NavigationDirection(str, Enum):
    START = "start"
    STRAIGHT = "straight"
    SLIGHT_LEFT = "slight_left"
    SLIGHT_RIGHT = "slight_right"
    RIGHT = "right"
    LEFT = "left"
    SHARP_LEFT = "sharp_left"
    SHARP_RIGHT = "sharp_right"

    @property
    def phrase(self) -> str:
        return _PHRASES[self]

    @classmethod
    def from_phrase(cls, phrase: str) -> "NavigationDirection | None":
        for direction, text in _PHRASES.items():
            if text == phrase:
                return direction
        return None


_PHRASES: dict[NavigationDirection, str] = {
    NavigationDirection.START: "Start",
    NavigationDirection.STRAIGHT: "Go straight",
    NavigationDirection.SLIGHT_LEFT: "Slight left",
    NavigationDirection.SLIGHT_RIGHT: "Slight right",
    NavigationDirection.RIGHT: "Turn right",
    NavigationDirection.LEFT: "Turn left",
    NavigationDirection.SHARP_LEFT: "Sharp left",
    NavigationDirection.SHARP_RIGHT: "Sharp right",
}

_STEP_RE = re.compile(
    r"([a-zA-Z\s]+) on ([\w\s]*) and continue for ([0-9.]+) miles\."
)


@dataclass(frozen=True, slots=True)
class NavigationStep:
    """One turn-by-turn instruction: a direction, the way it applies to and
    the distance to travel along that way (miles)."""

    direction: NavigationDirection
    way: str
    distance_mi: float = 0.0

    def __str__(self) -> str:
        return (
            f"{self.direction.phrase} on {self.way} "
            f"and continue for {self.distance_mi:.3f} miles."
        )

    @classmethod
    def from_string(cls, raw: str) -> "NavigationStep | None":
        """Parse the ``str()`` form back; returns None when it does not match."""

        m = _STEP_RE.fullmatch(raw)
        if m is None:
            return None

        direction = NavigationDirection.from_phrase(m.group(1))
        if direction is None:
            return None

        try:
            distance = float(m.group(3))
        except ValueError:
            return None

        return cls(direction=direction, way=m.group(2), distance_mi=distance)
