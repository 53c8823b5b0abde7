"""Cursor blink state machine."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class BlinkState(Enum):
    WAITING = "waiting"
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class ShouldRender:
    """When the next frame needs to be drawn.

    Neither flag set means wait for the next event.
    """

    immediately: bool = False
    deadline: Optional[float] = None

    @classmethod
    def wait(cls) -> ShouldRender:
        return cls()

    @classmethod
    def immediate(cls) -> ShouldRender:
        return cls(immediately=True)

    @classmethod
    def at(cls, deadline: float) -> ShouldRender:
        return cls(deadline=deadline)

    @property
    def is_wait(self) -> bool:
        return not self.immediately and self.deadline is None


def is_static(cursor: Any) -> bool:
    """A cursor does not blink when any of its blink timings is missing or zero."""
    return any(
        not value for value in (cursor.blinkwait, cursor.blinkoff, cursor.blinkon)
    )


class BlinkStatus:
    """Tracks the blink phase of a cursor with blinkwait/blinkon/blinkoff in milliseconds.

    Times are in seconds on a monotonic clock.
    """

    def __init__(self, now: Optional[float] = None) -> None:
        self._state = BlinkState.WAITING
        self._transition_time = time.monotonic() if now is None else now
        self._current_cursor: Any = None

    @property
    def state(self) -> BlinkState:
        return self._state

    @property
    def transition_time(self) -> float:
        """When the cursor changes to its next state."""
        return self._transition_time

    def _delay(self) -> float:
        cursor = self._current_cursor
        if cursor is None:
            return 0.0
        delay_ms = {
            BlinkState.WAITING: cursor.blinkwait,
            BlinkState.OFF: cursor.blinkoff,
            BlinkState.ON: cursor.blinkon,
        }[self._state]
        return (delay_ms or 0) / 1000.0

    def update_status(self, new_cursor: Any, now: Optional[float] = None) -> ShouldRender:
        """Advance the blink state for the given cursor and say when to draw next."""
        if now is None:
            now = time.monotonic()
        if self._current_cursor is None or new_cursor != self._current_cursor:
            self._current_cursor = copy.copy(new_cursor)
            if new_cursor.blinkwait:
                self._state = BlinkState.WAITING
            else:
                self._state = BlinkState.ON
            self._transition_time = now + self._delay()

        if is_static(self._current_cursor):
            self._state = BlinkState.WAITING
            return ShouldRender.wait()

        if self._transition_time <= now:
            self._state = (
                BlinkState.OFF if self._state is BlinkState.ON else BlinkState.ON
            )
            self._transition_time += self._delay()
            # Far behind: restart the phase from now.
            if self._transition_time <= now:
                self._transition_time = now + self._delay()
            return ShouldRender.immediate()
        return ShouldRender.at(self._transition_time)

    def opacity(self, now: Optional[float] = None) -> float:
        """Opacity for smooth blinking: 0.0 is transparent, 1.0 is opaque."""
        if self._state is BlinkState.WAITING:
            return 1.0
        if now is None:
            now = time.monotonic()
        total = self._delay()
        remaining = max(0.0, self._transition_time - now)
        fraction = remaining / total
        if self._state is BlinkState.ON:
            return min(max(fraction, 0.0), 1.0)
        return min(max(1.0 - fraction, 0.0), 1.0)

    def should_animate(self) -> bool:
        """Whether smooth blinking needs animation frames."""
        return self._state is not BlinkState.WAITING

    def should_render(self) -> bool:
        """Whether the cursor is visible when smooth blinking is off."""
        return self._state is not BlinkState.OFF