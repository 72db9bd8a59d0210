"""
Projection bounded context

One scheduled screening and the booking state of its seats
Responsibilities:
- Seat grid lifecycle (built from the room, reset on room change)
- Take/free seats with per-projection mutual exclusion
- Booking saga with payment compensation
"""
