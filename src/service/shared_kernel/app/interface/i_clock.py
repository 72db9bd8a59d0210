"""Clock Interface (Port)

Time source injected wherever "now" matters, so callers can pin time.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """
        Current instant

        Returns:
            Timezone-aware datetime
        """
        pass
