from typing import Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidArgumentError(DomainError):
    """A supplied value violates an invariant; raised before any mutation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class SeatCoordinateOutOfRangeError(DomainError):
    """Row or column falls outside the seat grid."""

    def __init__(
        self,
        row: int,
        col: int,
        *,
        label: Optional[str] = None,
        room_number: Optional[int] = None,
    ) -> None:
        self.row = row
        self.col = col
        seat = f'Seat {label}' if label else f'Seat ({row}, {col})'
        where = f' in room {room_number}' if room_number is not None else ''
        super().__init__(f'{seat} does not exist{where}', 404)
