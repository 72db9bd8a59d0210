"""
Seat Coordinate Value Object

Zero-based (row, col) pair; its label is the row letter plus the 1-based
column, e.g. SeatCoordinate(1, 4).label == 'B5'.
"""

import re

import attrs

from src.platform.exception.exceptions import InvalidArgumentError
from src.service.cinema.domain.row_label import row_letter_to_row_index, seat_label


_LABEL_PATTERN = re.compile(r'^([A-Za-z]+)(\d+)$')


@attrs.define(frozen=True)
class SeatCoordinate:
    row: int
    col: int

    @property
    def label(self) -> str:
        return seat_label(self.row, self.col)

    @classmethod
    def from_label(cls, label: str) -> 'SeatCoordinate':
        match = _LABEL_PATTERN.match(label.strip())
        if not match or int(match.group(2)) < 1:
            raise InvalidArgumentError(
                f'Invalid seat label: {label!r}. Expected row letter(s) + column number, e.g. B5'
            )
        return cls(row=row_letter_to_row_index(match.group(1)), col=int(match.group(2)) - 1)
