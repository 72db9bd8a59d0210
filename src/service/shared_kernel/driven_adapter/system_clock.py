from datetime import datetime, timezone

from src.service.shared_kernel.app.interface.i_clock import IClock


class SystemClock(IClock):
    """Wall-clock time in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
