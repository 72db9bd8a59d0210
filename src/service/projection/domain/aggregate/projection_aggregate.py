"""
Projection Aggregate - one scheduled screening of a movie in a room

[DDD Design Principles]
- Projection is the Aggregate Root
- ProjectionSeat cells are entities owned by the aggregate; callers only
  ever receive copies of them

[Business Invariants]
- Seat grid dimensions always equal room.rows x room.cols
- Reassigning the room rebuilds the grid with every seat available
- A seat cannot be taken twice without being freed in between
- id is non-negative when reassigned (construction stores it as given)
- date_time is timezone-aware and strictly after clock.now() whenever it is set
- price is a Decimal rounded half-up to the cent and strictly positive

[Concurrency]
- One re-entrant lock per projection guards the whole grid, so
  take_seat/free_seat check-then-set atomically and count_available_seats
  reads a consistent snapshot
- Room reassignment holds the same lock, so it never interleaves with seat
  operations
- Different projections never share a lock
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import threading
from typing import Any, List, Optional, Tuple

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InvalidArgumentError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.room_entity import PhysicalSeat, Room
from src.service.cinema.domain.row_label import coordinate_out_of_range, seat_label
from src.service.projection.domain.entity.projection_seat_entity import ProjectionSeat
from src.service.projection.domain.value_object.seat_coordinate import SeatCoordinate
from src.service.shared_kernel.app.interface.i_clock import IClock
from src.service.shared_kernel.driven_adapter.system_clock import SystemClock


CENT = Decimal('0.01')


def round_price(value: Any) -> Decimal:
    """Round half-up to the cent. Floats go through str() so 9.005 -> 9.01."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f'Invalid price: {value!r}')
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise InvalidArgumentError(f'Invalid price: {value!r}')
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidArgumentError(f'Invalid price: {value!r}') from e


def _check_id(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f'Projection id must be a non-negative integer, got {value!r}')


def _validate_date_time(instance: 'Projection', attribute: attrs.Attribute, value: datetime) -> None:
    if not isinstance(value, datetime):
        raise InvalidArgumentError(f'Projection date_time must be a datetime, got {value!r}')
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError('Projection date_time must be timezone-aware')
    if value <= instance._clock.now():
        raise InvalidArgumentError(f'Projection date_time {value.isoformat()} is not in the future')


def _validate_price(instance: object, attribute: attrs.Attribute, value: Decimal) -> None:
    if value <= 0:
        raise InvalidArgumentError(f'Projection price must be positive, got {value}')


def _build_grid(room: Room) -> List[List[ProjectionSeat]]:
    return [
        [ProjectionSeat(physical_seat=room.seat_at(r, c)) for c in range(room.number_of_cols)]
        for r in range(room.number_of_rows)
    ]


@attrs.define(eq=False)
class Projection:
    """
    Construction validates date_time and price like the setters do; the id
    is stored as given and only checked when reassigned.
    Assigning to a property validates before mutating; a failed assignment
    leaves the projection unchanged.
    """

    _id: int
    _movie: Movie
    _date_time: datetime = attrs.field(validator=_validate_date_time)
    _price: Decimal = attrs.field(converter=round_price, validator=_validate_price)
    _room: Room
    _clock: IClock = attrs.field(factory=SystemClock, repr=False)
    _lock: threading.RLock = attrs.field(factory=threading.RLock, init=False, repr=False)
    _seats: List[List[ProjectionSeat]] = attrs.field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        self._seats = _build_grid(self._room)

    # ==================== Accessors ====================

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    @Logger.io
    def id(self, value: int) -> None:
        _check_id(value)
        with self._lock:
            self._id = value

    @property
    def movie(self) -> Movie:
        return self._movie

    @movie.setter
    def movie(self, movie: Movie) -> None:
        with self._lock:
            self._movie = movie

    @property
    def room(self) -> Room:
        return self._room

    @room.setter
    @Logger.io
    def room(self, room: Room) -> None:
        """Replace the room and rebuild the grid; all booking state is dropped."""
        seats = _build_grid(room)
        with self._lock:
            taken = sum(not seat.available for row in self._seats for seat in row)
            self._room = room
            self._seats = seats
        if taken:
            Logger.base.warning(
                f'♻️ [SET-ROOM] Projection {self._id}: moved to room {room.number}, '
                f'{taken} taken seat(s) released'
            )

    @property
    def date_time(self) -> datetime:
        return self._date_time

    @date_time.setter
    @Logger.io
    def date_time(self, value: datetime) -> None:
        with self._lock:
            self._date_time = value

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    @Logger.io
    def price(self, value: Any) -> None:
        with self._lock:
            self._price = value

    @property
    def seats(self) -> Tuple[Tuple[ProjectionSeat, ...], ...]:
        """Copy of the seat grid, taken under the lock."""
        with self._lock:
            return tuple(tuple(attrs.evolve(seat) for seat in row) for row in self._seats)

    # ==================== Seat operations ====================

    def _cell(self, row: int, col: int) -> ProjectionSeat:
        # Caller must hold self._lock
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidArgumentError(
                    f'Seat coordinates must be integers, got ({row!r}, {col!r})'
                )
        if not (0 <= row < len(self._seats) and 0 <= col < len(self._seats[row])):
            raise coordinate_out_of_range(row, col, room_number=self._room.number)
        return self._seats[row][col]

    def is_seat_available(self, row: int, col: int) -> bool:
        with self._lock:
            return self._cell(row, col).available

    def count_available_seats(self) -> int:
        with self._lock:
            return sum(seat.available for row in self._seats for seat in row)

    @Logger.io
    def take_seat(self, row: int, col: int) -> bool:
        """
        Book a seat

        Returns:
            True if the seat was free and is now taken, False if it was
            already taken (no state change)
        """
        with self._lock:
            taken = self._cell(row, col).take()
        if taken:
            Logger.base.info(f'🎟️ [TAKE-SEAT] Projection {self._id}: seat {seat_label(row, col)} taken')
        else:
            Logger.base.debug(
                f'⏳ [TAKE-SEAT] Projection {self._id}: seat {seat_label(row, col)} already taken'
            )
        return taken

    @Logger.io
    def free_seat(self, row: int, col: int) -> bool:
        """
        Release a seat

        Returns:
            True if the seat was taken and is now free, False if it was
            already free (no state change)
        """
        with self._lock:
            freed = self._cell(row, col).free()
        if freed:
            Logger.base.info(f'🔓 [FREE-SEAT] Projection {self._id}: seat {seat_label(row, col)} freed')
        else:
            Logger.base.debug(
                f'⏳ [FREE-SEAT] Projection {self._id}: seat {seat_label(row, col)} already free'
            )
        return freed

    def get_physical_seat(self, row: int, col: int) -> PhysicalSeat:
        with self._lock:
            return self._cell(row, col).physical_seat

    def find_seat(self, physical_seat: PhysicalSeat) -> Optional[SeatCoordinate]:
        with self._lock:
            for r, row in enumerate(self._seats):
                for c, seat in enumerate(row):
                    if seat.physical_seat is physical_seat:
                        return SeatCoordinate(row=r, col=c)
        return None

    def seat_coordinates_of(self, physical_seat: PhysicalSeat) -> Optional[str]:
        """Label such as 'B5', or None if the seat is not in this projection's room"""
        coordinate = self.find_seat(physical_seat)
        return coordinate.label if coordinate else None

    # ==================== Ordering & presentation ====================

    def compare_to(self, other: 'Projection') -> int:
        return (self._date_time > other._date_time) - (self._date_time < other._date_time)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self._date_time < other._date_time

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        return self._date_time > other._date_time

    def summary(self) -> str:
        local = self._date_time.astimezone(settings.display_tz)
        return (
            f'Room no.: {self._room.number}\n'
            f'Date: {local:%A} {local.day} {local:%B} {local.year}   Time: {local:%H:%M}\n'
            f'Price: {self._price:.2f} {settings.CURRENCY_SYMBOL}\n'
            f'Available seats: {self.count_available_seats()}\n'
        )
