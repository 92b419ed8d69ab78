"""Trains that tickets are issued for."""


class Train:
    """A train service identified by its number, pulling a number of cars.

    The constructor stores its arguments as given; the setters guard them:
    a negative train number becomes 0 and a negative car count is ignored.
    """

    __slots__ = ("_number", "_cars")

    def __init__(self, number=1, cars=1):
        self._number = number
        self._cars = cars

    @property
    def number(self):
        """The service number of the train."""
        return self._number

    @number.setter
    def number(self, value):
        self._number = 0 if value < 0 else value

    @property
    def cars(self):
        """The number of cars the train pulls."""
        return self._cars

    @cars.setter
    def cars(self, value):
        if value >= 0:
            self._cars = value

    def __eq__(self, other):
        if not isinstance(other, Train):
            return NotImplemented
        return (self._number, self._cars) == (other._number, other._cars)

    __hash__ = None

    def __repr__(self):
        return f"Train(number={self._number!r}, cars={self._cars!r})"