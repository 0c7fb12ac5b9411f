"""Tick cadence - decides when the driver should advance the simulation."""


class TickTimer:
    """
    Accumulates elapsed frame time and reports when a tick is due.

    Once at least ``interval_ms`` has accumulated a single tick is due and the
    accumulator starts again from zero; surplus time is dropped rather than
    replayed, so a slow frame skips ticks instead of bursting.
    """

    def __init__(self, interval_ms: int = 32):
        self.interval_ms = interval_ms
        self.elapsed_ms = 0

    def add(self, elapsed_ms: int) -> bool:
        """
        Record a frame's duration.

        Zero-length frames count as one millisecond.

        Returns:
            True if a tick should run now
        """
        self.elapsed_ms += max(1, elapsed_ms)
        if self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms = 0
            return True
        return False

    def reset(self) -> None:
        self.elapsed_ms = 0
