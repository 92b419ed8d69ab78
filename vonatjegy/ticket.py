"""Train tickets."""

from .train import Train

MAX_SEAT = 50
DEFAULT_TEXT = "Default"


class Ticket:
    """A ticket for one seat on a train between two stations.

    Assigning ``seat`` clamps it: a negative seat becomes 1 and a seat
    above ``MAX_SEAT`` becomes ``MAX_SEAT``.  Adding a ticket to a number
    adds its price, so ``sum(tickets)`` gives the total price.
    """

    def __init__(
        self,
        train=None,
        seat=1,
        departure_time=DEFAULT_TEXT,
        arrival_time=DEFAULT_TEXT,
        from_station=DEFAULT_TEXT,
        to_station=DEFAULT_TEXT,
        price=1,
    ):
        self.train = Train(1, 1) if train is None else train
        self._seat = seat
        self.departure_time = departure_time
        self.arrival_time = arrival_time
        self.from_station = from_station
        self.to_station = to_station
        self.price = price

    @property
    def seat(self):
        """The seat the ticket is booked for."""
        return self._seat

    @seat.setter
    def seat(self, value):
        if value < 0:
            self._seat = 1
        elif value > MAX_SEAT:
            self._seat = MAX_SEAT
        else:
            self._seat = value

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return other + self.price

    def _key(self):
        return (
            self.train.number,
            self.train.cars,
            self._seat,
            self.departure_time,
            self.arrival_time,
            self.from_station,
            self.to_station,
            self.price,
        )

    def __eq__(self, other):
        if not isinstance(other, Ticket):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __repr__(self):
        return (
            f"Ticket(train={self.train!r}, seat={self._seat!r}, "
            f"departure_time={self.departure_time!r}, arrival_time={self.arrival_time!r}, "
            f"from_station={self.from_station!r}, to_station={self.to_station!r}, "
            f"price={self.price!r})"
        )