import pytest

from src.platform.exception.exceptions import SeatCoordinateOutOfRangeError
from src.service.projection.app.command.release_seats_use_case import (
    ReleaseSeatsRequest,
    ReleaseSeatsUseCase,
)
from src.service.projection.domain.value_object.seat_coordinate import SeatCoordinate


pytestmark = pytest.mark.unit


class TestReleaseSeatsUseCase:
    def setup_method(self):
        self.use_case = ReleaseSeatsUseCase()

    def test_reports_which_seats_were_released(self, projection):
        projection.take_seat(0, 0)
        projection.take_seat(0, 1)

        result = self.use_case.execute(
            ReleaseSeatsRequest(
                projection=projection,
                seats=[SeatCoordinate(0, 0), SeatCoordinate(0, 1), SeatCoordinate(0, 2)],
            )
        )

        assert result.released == {'A1': True, 'A2': True, 'A3': False}
        assert result.released_count == 2
        assert projection.count_available_seats() == 40

    def test_duplicate_seat_is_reported_once(self, projection):
        projection.take_seat(1, 1)

        result = self.use_case.execute(
            ReleaseSeatsRequest(projection=projection, seats=[SeatCoordinate(1, 1)] * 2)
        )

        assert result.released == {'B2': True}

    def test_out_of_range_raises_before_releasing(self, projection):
        projection.take_seat(0, 0)

        with pytest.raises(SeatCoordinateOutOfRangeError):
            self.use_case.execute(
                ReleaseSeatsRequest(
                    projection=projection, seats=[SeatCoordinate(0, 0), SeatCoordinate(5, 0)]
                )
            )

        assert projection.is_seat_available(0, 0) is False
