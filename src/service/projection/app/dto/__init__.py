"""Projection Application DTOs"""

from src.service.projection.app.dto.seat_map_dto import SeatCellDto, SeatMapDto, SeatRowDto

__all__ = ['SeatCellDto', 'SeatMapDto', 'SeatRowDto']
