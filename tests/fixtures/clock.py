"""Fixed clock for deterministic header timestamps."""

from datetime import datetime


class FixedClock:
    """Clock that always returns the same moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
