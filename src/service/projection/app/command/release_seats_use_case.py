"""
Release Seats Use Case

Release primitive for cancellations and hold expiry.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from src.platform.logging.loguru_io import Logger
from src.service.projection.domain.aggregate.projection_aggregate import Projection
from src.service.projection.domain.value_object.seat_coordinate import SeatCoordinate


@dataclass
class ReleaseSeatsRequest:
    projection: Projection
    seats: List[SeatCoordinate]


@dataclass
class ReleaseSeatsResult:
    # label -> True if the seat was released, False if it was already free
    released: Dict[str, bool] = field(default_factory=dict)

    @property
    def released_count(self) -> int:
        return sum(self.released.values())


class ReleaseSeatsUseCase:
    @Logger.io
    def execute(self, request: ReleaseSeatsRequest) -> ReleaseSeatsResult:
        projection = request.projection
        for seat in request.seats:
            projection.get_physical_seat(seat.row, seat.col)

        result = ReleaseSeatsResult()
        for seat in dict.fromkeys(request.seats):
            result.released[seat.label] = projection.free_seat(seat.row, seat.col)

        Logger.base.info(
            f'🔓 [RELEASE-SEATS] Projection {projection.id}: '
            f'released {result.released_count}/{len(result.released)}'
        )
        return result
