"""
Room seat catalog

Static layout of a cinema room: a rows x cols grid of physical seats,
created once and only read afterwards. Coordinates are zero-based.
"""

from typing import Iterable, Tuple

import attrs

from src.platform.exception.exceptions import InvalidArgumentError
from src.service.cinema.domain.row_label import (
    coordinate_out_of_range,
    row_index_to_row_letter,
    seat_label,
)


@attrs.define(frozen=True, eq=False)
class PhysicalSeat:
    """A seat in the room catalog. Compared by identity."""

    row: int
    col: int
    exists: bool = True

    @property
    def label(self) -> str:
        return seat_label(self.row, self.col)


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise InvalidArgumentError(f'Room {attribute.name} must be positive, got {value}')


@attrs.define(frozen=True, repr=False)
class Room:
    number: int
    rows: int = attrs.field(validator=_validate_positive)
    cols: int = attrs.field(validator=_validate_positive)
    seats: Tuple[Tuple[PhysicalSeat, ...], ...] = attrs.field(eq=False)

    @seats.validator
    def _check_seats(self, attribute: attrs.Attribute, value: Tuple) -> None:
        if len(value) != self.rows or any(len(row) != self.cols for row in value):
            raise InvalidArgumentError(
                f'Room {self.number} seat grid does not match {self.rows}x{self.cols}'
            )

    @classmethod
    def create(
        cls, *, number: int, rows: int, cols: int, missing: Iterable[Tuple[int, int]] = ()
    ) -> 'Room':
        """
        Build a room with a full grid of seats.

        Coordinates listed in ``missing`` stay in the grid with ``exists=False``
        (aisles, removed seats).
        """
        missing_set = set(missing)
        seats = tuple(
            tuple(PhysicalSeat(row=r, col=c, exists=(r, c) not in missing_set) for c in range(cols))
            for r in range(rows)
        )
        return cls(number=number, rows=rows, cols=cols, seats=seats)

    @property
    def number_of_rows(self) -> int:
        return self.rows

    @property
    def number_of_cols(self) -> int:
        return self.cols

    def seat_at(self, row: int, col: int) -> PhysicalSeat:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise coordinate_out_of_range(row, col, room_number=self.number)
        return self.seats[row][col]

    @staticmethod
    def row_index_to_row_letter(index: int) -> str:
        return row_index_to_row_letter(index)

    def __repr__(self) -> str:
        return f'Room(number={self.number}, rows={self.rows}, cols={self.cols})'
