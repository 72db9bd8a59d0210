"""
Concurrency tests for Projection seat operations

Many threads race on the same projection; the per-projection lock must make
every check-then-set atomic and keep projections independent of each other.
"""

from concurrent.futures import ThreadPoolExecutor, wait
import threading

import pytest

from src.service.cinema.domain.entity.room_entity import Room


pytestmark = pytest.mark.unit

CALLERS = 32


def _race(callers: int, action):
    barrier = threading.Barrier(callers)

    def attempt(_: int):
        barrier.wait()
        return action()

    with ThreadPoolExecutor(max_workers=callers) as pool:
        return list(pool.map(attempt, range(callers)))


class TestConcurrentBooking:
    @pytest.mark.parametrize('round_', range(5))
    def test_exactly_one_concurrent_taker_wins(self, projection, round_):
        results = _race(CALLERS, lambda: projection.take_seat(2, 3))

        assert results.count(True) == 1
        assert results.count(False) == CALLERS - 1
        assert projection.is_seat_available(2, 3) is False
        assert projection.count_available_seats() == 39

    def test_exactly_one_concurrent_release_wins(self, projection):
        projection.take_seat(4, 4)

        results = _race(CALLERS, lambda: projection.free_seat(4, 4))

        assert results.count(True) == 1
        assert projection.count_available_seats() == 40

    def test_every_seat_booked_once_under_contention(self, make_projection):
        # Given: 8 callers each trying to book every seat of a 6x6 room
        projection = make_projection(room=Room.create(number=3, rows=6, cols=6))
        coordinates = [(r, c) for r in range(6) for c in range(6)]
        wins: list[tuple[int, int]] = []
        wins_lock = threading.Lock()

        def book_everything():
            for r, c in coordinates:
                if projection.take_seat(r, c):
                    with wins_lock:
                        wins.append((r, c))

        # When
        _race(8, book_everything)

        # Then: no seat was sold twice and the room is full
        assert sorted(wins) == coordinates
        assert projection.count_available_seats() == 0

    def test_count_is_consistent_while_booking(self, make_projection):
        projection = make_projection(room=Room.create(number=3, rows=10, cols=10))
        counts: list[int] = []
        done = threading.Event()

        def book():
            for r in range(10):
                for c in range(10):
                    projection.take_seat(r, c)
            done.set()

        def observe():
            while not done.is_set():
                counts.append(projection.count_available_seats())

        with ThreadPoolExecutor(max_workers=2) as pool:
            wait([pool.submit(observe), pool.submit(book)])

        # Observed counts only ever go down and stay within the grid
        assert all(0 <= count <= 100 for count in counts)
        assert counts == sorted(counts, reverse=True)
        assert projection.count_available_seats() == 0


class TestLockScope:
    def test_projections_do_not_block_each_other(self, make_projection):
        first, second = make_projection(id=1), make_projection(id=2)

        with first._lock, ThreadPoolExecutor(max_workers=1) as pool:
            future = pool.submit(second.take_seat, 0, 0)
            assert future.result(timeout=5) is True

    def test_room_change_waits_for_seat_operations(self, projection):
        new_room = Room.create(number=9, rows=2, cols=2)

        with ThreadPoolExecutor(max_workers=1) as pool:
            with projection._lock:
                future = pool.submit(setattr, projection, 'room', new_room)
                done, _ = wait([future], timeout=0.2)
                assert not done
                assert projection.count_available_seats() == 40
            future.result(timeout=5)

        assert projection.count_available_seats() == 4
