"""
Book Seats Use Case

Saga over a single projection: take the seats, charge the payment, and free
the seats again if any step after taking them fails.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger
from src.service.projection.app.interface.i_payment import IPayment
from src.service.projection.domain.aggregate.projection_aggregate import Projection
from src.service.projection.domain.value_object.seat_coordinate import SeatCoordinate


class BookingOutcome(Enum):
    BOOKED = 'booked'
    SEAT_TAKEN = 'seat_taken'
    PAYMENT_DECLINED = 'payment_declined'


@dataclass
class BookSeatsRequest:
    projection: Projection
    seats: List[SeatCoordinate]
    payment: IPayment


@dataclass
class BookSeatsResult:
    outcome: BookingOutcome
    seat_labels: List[str] = field(default_factory=list)
    amount: Decimal = Decimal('0.00')
    unavailable_seat: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is BookingOutcome.BOOKED


class BookSeatsUseCase:
    @staticmethod
    def _validate(request: BookSeatsRequest) -> None:
        if not request.seats:
            raise InvalidArgumentError('At least one seat must be requested')
        if len(set(request.seats)) != len(request.seats):
            raise InvalidArgumentError('The same seat was requested more than once')
        # Raises SeatCoordinateOutOfRangeError before anything is taken
        for seat in request.seats:
            request.projection.get_physical_seat(seat.row, seat.col)

    @staticmethod
    def _release(projection: Projection, seats: List[SeatCoordinate]) -> None:
        for seat in seats:
            projection.free_seat(seat.row, seat.col)

    @Logger.io
    def execute(self, request: BookSeatsRequest) -> BookSeatsResult:
        self._validate(request)
        projection = request.projection
        labels = [seat.label for seat in request.seats]

        taken: List[SeatCoordinate] = []
        for seat in request.seats:
            if not projection.take_seat(seat.row, seat.col):
                self._release(projection, taken)
                Logger.base.info(
                    f'⛔ [BOOK-SEATS] Projection {projection.id}: seat {seat.label} unavailable'
                )
                return BookSeatsResult(
                    outcome=BookingOutcome.SEAT_TAKEN,
                    seat_labels=labels,
                    unavailable_seat=seat.label,
                )
            taken.append(seat)

        amount = projection.price * len(taken)
        try:
            paid = request.payment.decrease_money(amount)
        except Exception:
            Logger.base.error(
                f'❌ [BOOK-SEATS] Projection {projection.id}: payment failed, releasing {labels}'
            )
            self._release(projection, taken)
            raise

        if not paid:
            self._release(projection, taken)
            Logger.base.info(
                f'💳 [BOOK-SEATS] Projection {projection.id}: payment of {amount} declined, '
                f'released {labels}'
            )
            return BookSeatsResult(
                outcome=BookingOutcome.PAYMENT_DECLINED, seat_labels=labels, amount=amount
            )

        Logger.base.info(f'✅ [BOOK-SEATS] Projection {projection.id}: booked {labels} for {amount}')
        return BookSeatsResult(outcome=BookingOutcome.BOOKED, seat_labels=labels, amount=amount)
