"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.projection.app.command.book_seats_use_case import BookSeatsUseCase
from src.service.projection.app.command.release_seats_use_case import ReleaseSeatsUseCase
from src.service.projection.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.projection.app.query.list_projections_use_case import ListProjectionsUseCase
from src.service.projection.domain.aggregate.projection_aggregate import Projection
from src.service.shared_kernel.driven_adapter.system_clock import SystemClock


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Time source shared by every projection built through the container
    clock = providers.Singleton(SystemClock)

    # Projections (each call builds a new screening bound to the container clock)
    projection = providers.Factory(Projection, clock=clock)

    # Use cases (stateless)
    book_seats_use_case = providers.Singleton(BookSeatsUseCase)
    release_seats_use_case = providers.Singleton(ReleaseSeatsUseCase)
    get_seat_map_use_case = providers.Singleton(GetSeatMapUseCase)
    list_projections_use_case = providers.Singleton(ListProjectionsUseCase, clock=clock)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
