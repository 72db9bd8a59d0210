"""Payment Interface (Port)

Single-operation capability a payment instrument exposes to the booking
workflow. How the money is actually moved is up to the implementation.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class IPayment(ABC):
    @abstractmethod
    def decrease_money(self, amount: Decimal) -> bool:
        """
        Charge the instrument

        Args:
            amount: Amount to deduct, already rounded to the cent

        Returns:
            True if the amount was deducted, False if the charge was declined
        """
        pass
