"""
Timer Module

Classes:
    Timer: Stop after a wall-clock duration
"""

import time
from datetime import timedelta
from typing   import TYPE_CHECKING

from galapagos.errors                              import ConfigurationError
from galapagos.termination.termination_condition import TerminationCondition
if TYPE_CHECKING:
    from galapagos.pool import Population

class Timer(TerminationCondition):
    """
    Satisfied once the given duration has elapsed. The clock
    starts the first time the condition is checked.
    """

    name = "timer"

    def __init__(self, duration: float | timedelta):
        """
        Parameters:
            duration: seconds, or a timedelta
        """
        if isinstance(duration, timedelta):
            duration = duration.total_seconds()
        if duration < 0:
            raise ConfigurationError(f"timer duration cannot be negative, got {duration}")
        self.duration: float = float(duration)

        self._start: float | None = None

    def check(self, population: 'Population') -> bool:
        now = time.monotonic()
        if self._start is None:
            self._start = now
        return now - self._start >= self.duration

    def __repr__(self):
        return f"Timer({self.duration})"
