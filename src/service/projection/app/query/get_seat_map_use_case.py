from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.row_label import row_index_to_row_letter
from src.service.projection.app.dto.seat_map_dto import SeatCellDto, SeatMapDto, SeatRowDto
from src.service.projection.domain.aggregate.projection_aggregate import Projection


class GetSeatMapUseCase:
    """Seat map for rendering, built from one consistent snapshot of the grid"""

    @Logger.io
    def execute(self, projection: Projection) -> SeatMapDto:
        grid = projection.seats
        rows = [
            SeatRowDto(
                letter=row_index_to_row_letter(r),
                cells=[
                    SeatCellDto(
                        label=seat.physical_seat.label,
                        exists=seat.physical_seat.exists,
                        available=seat.available,
                    )
                    for seat in row
                ],
            )
            for r, row in enumerate(grid)
        ]
        return SeatMapDto(
            projection_id=projection.id,
            room_number=projection.room.number,
            rows=rows,
            available_count=sum(cell.available for row in rows for cell in row.cells),
            total_count=sum(len(row.cells) for row in rows),
        )
