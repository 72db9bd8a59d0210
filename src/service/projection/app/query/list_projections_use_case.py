from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.projection.domain.aggregate.projection_aggregate import Projection
from src.service.shared_kernel.app.interface.i_clock import IClock


class ListProjectionsUseCase:
    def __init__(self, clock: IClock):
        self.clock = clock

    @Logger.io
    def execute(
        self,
        projections: Iterable[Projection],
        *,
        movie: Optional[Movie] = None,
        upcoming_only: bool = True,
    ) -> List[Projection]:
        """
        Screenings in chronological order

        Args:
            projections: Projections to list
            movie: Keep only screenings of this movie
            upcoming_only: Drop screenings that have already started

        Returns:
            Projections sorted by date_time; equal times keep input order
        """
        now = self.clock.now()
        selected = [
            projection
            for projection in projections
            if (movie is None or projection.movie == movie)
            and (not upcoming_only or projection.date_time > now)
        ]
        return sorted(selected)
