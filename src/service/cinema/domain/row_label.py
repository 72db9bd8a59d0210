"""
Row letter conversion for seat labels.

Rows are lettered spreadsheet-style (A..Z, AA..AZ, BA..) so rooms with more
than 26 rows keep unique labels. Columns are shown 1-based.
"""

from typing import Optional

from src.platform.exception.exceptions import InvalidArgumentError, SeatCoordinateOutOfRangeError


def row_index_to_row_letter(index: int) -> str:
    if index < 0:
        raise InvalidArgumentError(f'Row index must be non-negative, got {index}')
    letters = ''
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord('A') + remainder) + letters
    return letters


def row_letter_to_row_index(letters: str) -> int:
    if not letters or not letters.isascii() or not letters.isalpha():
        raise InvalidArgumentError(f'Invalid row letter: {letters!r}')
    index = 0
    for char in letters.upper():
        index = index * 26 + (ord(char) - ord('A') + 1)
    return index - 1


def seat_label(row: int, col: int) -> str:
    """(1, 4) -> 'B5'"""
    if col < 0:
        raise InvalidArgumentError(f'Column index must be non-negative, got {col}')
    return f'{row_index_to_row_letter(row)}{col + 1}'


def coordinate_out_of_range(
    row: int, col: int, *, room_number: Optional[int] = None
) -> SeatCoordinateOutOfRangeError:
    label = seat_label(row, col) if row >= 0 and col >= 0 else None
    return SeatCoordinateOutOfRangeError(row, col, label=label, room_number=room_number)
