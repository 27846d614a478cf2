"""Frame-time accumulator deciding when the next game tick runs."""

from __future__ import annotations

from viscera.constants import SECONDS_TO_WAIT


class GameEngine:
    """Accumulates frame time and reports when a tick is due."""

    def __init__(self) -> None:
        self._engine_time = 0.0
        self._tick_delay = 0.0

    def next_tick(self, frame_time: float) -> bool:
        """Add the frame's duration; return True when a tick is due."""
        self._engine_time += frame_time
        if self._engine_time > self._tick_delay + SECONDS_TO_WAIT:
            self._engine_time = 0.0
            self._tick_delay = 0.0
        return self._engine_time == 0.0

    def set_delay(self, delay: float) -> None:
        """Hold back the next tick by an extra ``delay`` seconds."""
        self._tick_delay = delay