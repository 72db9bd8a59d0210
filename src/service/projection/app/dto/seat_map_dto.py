"""Seat map DTOs for rendering a projection's seats."""

from typing import List

import attrs


@attrs.define(frozen=True)
class SeatCellDto:
    label: str
    exists: bool
    available: bool


@attrs.define(frozen=True)
class SeatRowDto:
    letter: str
    cells: List[SeatCellDto]


@attrs.define(frozen=True)
class SeatMapDto:
    projection_id: int
    room_number: int
    rows: List[SeatRowDto]
    available_count: int
    total_count: int
