"""
Touch gesture value objects.
"""

from dataclasses import dataclass
from enum import Enum


class SwipeDirection(str, Enum):
    """Direction of a classified swipe"""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        return self in (SwipeDirection.LEFT, SwipeDirection.RIGHT)


@dataclass(frozen=True)
class TouchPoint:
    """Touch coordinates in device-independent pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class SwipeEvent:
    """A completed swipe.

    ``distance_x`` and ``distance_y`` are measured origin minus end point, so a
    finger moving left or up yields positive distances.
    """

    direction: SwipeDirection
    distance_x: float = 0.0
    distance_y: float = 0.0


@dataclass
class GestureState:
    """Transient state of the gesture being tracked."""

    origin: TouchPoint
    last_position: TouchPoint
    active: bool = True

    @property
    def distance_x(self) -> float:
        return self.origin.x - self.last_position.x

    @property
    def distance_y(self) -> float:
        return self.origin.y - self.last_position.y
