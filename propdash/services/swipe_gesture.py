"""
Swipe gesture recognition for touch list rows.

The recognizer turns one touch-start / touch-move* / touch-end sequence
into at most one ``SwipeEvent``. Classification happens once, at
touch-end::

    dx = origin.x - last.x        dy = origin.y - last.y

    |dx| > |dy| and dx >  threshold  -> left
    |dx| > |dy| and dx < -threshold  -> right
    |dx| <= |dy| and dy >  threshold -> up
    |dx| <= |dy| and dy < -threshold -> down
    otherwise                        -> no event

On a swipe the haptic port is pulsed first (horizontal swipes only), then
the ``on_swipe`` listener runs, then the direction callback. Errors raised by
the listener or callbacks propagate to the caller. Spurious
platform events (touch-end or touch-move without a touch-start) are ignored.
"""

import logging
from typing import Callable, Optional

from ..config.settings import GestureConfig, get_settings
from ..models.gesture import GestureState, SwipeDirection, SwipeEvent, TouchPoint

logger = logging.getLogger(__name__)

SwipeCallback = Callable[[], None]
SwipeListener = Callable[[SwipeEvent], None]
HapticFeedback = Callable[[int], None]


class SwipeGestureRecognizer:
    """Single-pointer swipe recognizer.

    Args:
        threshold: Minimum distance in pixels, exclusive; defaults to settings
        on_swipe_left: Called on a left swipe
        on_swipe_right: Called on a right swipe
        on_swipe_up: Called on an up swipe
        on_swipe_down: Called on a down swipe
        on_swipe: Called with every emitted event
        haptic_feedback: Called with a pulse duration in ms after left/right swipes
        prevent_default_touch_move: Ask the host to suppress scrolling during moves
        config: Gesture settings
    """

    def __init__(
        self,
        threshold: Optional[float] = None,
        on_swipe_left: Optional[SwipeCallback] = None,
        on_swipe_right: Optional[SwipeCallback] = None,
        on_swipe_up: Optional[SwipeCallback] = None,
        on_swipe_down: Optional[SwipeCallback] = None,
        on_swipe: Optional[SwipeListener] = None,
        haptic_feedback: Optional[HapticFeedback] = None,
        prevent_default_touch_move: Optional[bool] = None,
        config: Optional[GestureConfig] = None,
    ):
        self.config = config or get_settings().gestures
        self.threshold = float(self.config.swipe_threshold if threshold is None else threshold)
        if self.threshold < 0:
            raise ValueError("Swipe threshold must be non-negative")

        self._callbacks = {
            SwipeDirection.LEFT: on_swipe_left,
            SwipeDirection.RIGHT: on_swipe_right,
            SwipeDirection.UP: on_swipe_up,
            SwipeDirection.DOWN: on_swipe_down,
        }
        self.on_swipe = on_swipe
        self.haptic_feedback = haptic_feedback
        if prevent_default_touch_move is None:
            prevent_default_touch_move = self.config.prevent_default_touch_move
        self.prevent_default_touch_move = prevent_default_touch_move
        self._state: Optional[GestureState] = None

    @property
    def is_tracking(self) -> bool:
        """True between touch-start and touch-end."""
        return self._state is not None and self._state.active

    @property
    def state(self) -> Optional[GestureState]:
        return self._state

    def touch_start(self, x: float, y: float) -> None:
        """Begin tracking; an unfinished gesture is discarded."""
        if self._state is not None:
            logger.debug("Touch start during an active gesture; restarting at new origin")
        origin = TouchPoint(x, y)
        self._state = GestureState(origin=origin, last_position=origin)

    def touch_move(self, x: float, y: float) -> bool:
        """Record the latest position.

        Returns:
            True when the host should suppress its default touch-move handling
        """
        if self._state is None:
            logger.debug("Touch move without touch start ignored")
            return False
        self._state.last_position = TouchPoint(x, y)
        return self.prevent_default_touch_move

    def touch_end(self) -> Optional[SwipeEvent]:
        """Finish the gesture and emit its swipe, if any."""
        state = self._state
        self._state = None
        if state is None:
            logger.debug("Touch end without touch start ignored")
            return None

        state.active = False
        direction = self.classify(state.distance_x, state.distance_y)
        if direction is None:
            return None

        event = SwipeEvent(direction=direction, distance_x=state.distance_x, distance_y=state.distance_y)
        logger.debug(f"Swipe {direction.value} (dx={state.distance_x:.1f}, dy={state.distance_y:.1f})")

        if direction.is_horizontal:
            self._pulse()
        if self.on_swipe is not None:
            self.on_swipe(event)
        callback = self._callbacks[direction]
        if callback is not None:
            callback()
        return event

    def cancel(self) -> None:
        """Drop the current gesture without classifying it."""
        self._state = None

    def classify(self, distance_x: float, distance_y: float) -> Optional[SwipeDirection]:
        """Direction for an origin-minus-end displacement, None below threshold."""
        if abs(distance_x) > abs(distance_y):
            if distance_x > self.threshold:
                return SwipeDirection.LEFT
            if distance_x < -self.threshold:
                return SwipeDirection.RIGHT
            return None
        if distance_y > self.threshold:
            return SwipeDirection.UP
        if distance_y < -self.threshold:
            return SwipeDirection.DOWN
        return None

    def _pulse(self) -> None:
        if self.haptic_feedback is None:
            return
        try:
            self.haptic_feedback(self.config.haptic_duration_ms)
        except Exception as e:
            logger.warning(f"Haptic feedback unavailable: {e}")
