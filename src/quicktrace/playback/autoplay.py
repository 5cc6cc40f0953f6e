"""Cooperative auto-play over a SortSession.

The player is a plain loop: show a snapshot, sleep for the interval,
advance the cursor. Stopping it is just a flag checked every tick, so
no threads are involved and tests can swap in a fake sleep.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from quicktrace.logs import get_logger
from quicktrace.recording.models import Snapshot
from quicktrace.session import SortSession

logger = get_logger(__name__)

StepCallback = Callable[[Snapshot, int], None]


class AutoPlayer:
    """Advance a session's cursor at a fixed interval.

    Args:
        session: The session whose cursor is advanced.
        interval_ms: Delay between snapshots in milliseconds.
        sleep: Called with a delay in seconds between frames.
    """

    def __init__(
        self,
        session: SortSession,
        interval_ms: int = 300,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.session = session
        self.set_speed(interval_ms)
        self._sleep = sleep
        self._stopped = False

    def set_speed(self, interval_ms: int) -> None:
        """Change the interval. Takes effect at the next tick."""
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be non-negative, got {interval_ms}")
        self.interval_ms = interval_ms

    def stop(self) -> None:
        """Ask a running play() loop to return before its next frame."""
        self._stopped = True

    @property
    def stopped(self) -> bool:
        return self._stopped

    def play(self, on_step: StepCallback) -> int:
        """Show the current snapshot, then each following one in turn.

        Returns once the last snapshot has been shown or stop() was
        called, whichever comes first.

        Args:
            on_step: Called with each snapshot and its index.

        Returns:
            Number of snapshots passed to ``on_step``.
        """
        self._stopped = False
        shown = 0
        on_step(self.session.current(), self.session.cursor)
        shown += 1
        while not self.session.at_end:
            self._sleep(self.interval_ms / 1000)
            if self._stopped:
                logger.debug("Auto-play stopped at step %d", self.session.cursor)
                break
            self.session.step_forward()
            on_step(self.session.current(), self.session.cursor)
            shown += 1
        return shown

    def restart(self, on_step: StepCallback) -> int:
        """Rewind the session and play from the first snapshot."""
        self.session.rewind()
        return self.play(on_step)
