import attrs

from src.service.cinema.domain.entity.room_entity import PhysicalSeat


@attrs.define
class ProjectionSeat:
    """
    Booking state of one physical seat within one projection

    Owned by its Projection, which serializes every call to take/free.
    """

    physical_seat: PhysicalSeat
    available: bool = True

    def take(self) -> bool:
        if not self.available:
            return False
        self.available = False
        return True

    def free(self) -> bool:
        if self.available:
            return False
        self.available = True
        return True
