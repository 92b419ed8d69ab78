"""Lists of trains and tickets, and their tab-separated file format."""

from .ticket import Ticket
from .train import Train


class FormatError(ValueError):
    """Raised when a saved list cannot be read back."""


def read_word(stream):
    """Read one whitespace-delimited word from a text stream.

    Leading whitespace is skipped and the whitespace after the word is
    consumed.  Returns an empty string at the end of the input.
    """
    chars = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars)


def _words(stream):
    return iter(lambda: read_word(stream), "")


def _next_word(words):
    word = next(words, None)
    if word is None:
        raise FormatError("unexpected end of file")
    return word


def _next_int(words):
    word = _next_word(words)
    try:
        return int(word)
    except ValueError:
        raise FormatError(f"not a number: {word!r}") from None


def _read_count(words):
    word = next(words, None)
    try:
        count = int(word) if word is not None else None
    except ValueError:
        count = None
    if count is None or count < 0:
        raise FormatError("invalid size")
    return count


def _check_index(index, size):
    if not 0 <= index < size:
        raise IndexError("index out of range")


class TrainList:
    """An ordered list of trains, initially holding ``size`` default trains."""

    def __init__(self, size=1):
        if size < 0:
            raise ValueError("size must not be negative")
        self._trains = [Train() for _ in range(size)]

    def __getitem__(self, index):
        _check_index(index, len(self._trains))
        return self._trains[index]

    def __len__(self):
        return len(self._trains)

    def __iter__(self):
        return iter(self._trains)

    def append(self, train):
        """Add a train at the end of the list."""
        self._trains.append(train)

    def index_of(self, number):
        """Return the index of the first train with this number, or -1."""
        return next(
            (i for i, train in enumerate(self._trains) if train.number == number), -1
        )

    def save(self, path):
        """Write the list to a file: the count, then number and cars per train."""
        with open(path, "w", encoding="utf-8") as file:
            file.write(f"{len(self._trains)}\t")
            for train in self._trains:
                file.write(f"{train.number}\t{train.cars}\t")

    def load(self, path):
        """Replace the contents with the list saved in a file."""
        with open(path, encoding="utf-8") as file:
            words = _words(file)
            count = _read_count(words)
            trains = [Train(_next_int(words), _next_int(words)) for _ in range(count)]
        self._trains = trains


class TicketList:
    """An ordered list of tickets, initially holding ``size`` default tickets."""

    def __init__(self, size=1):
        if size < 0:
            raise ValueError("size must not be negative")
        self._tickets = [Ticket() for _ in range(size)]

    def __getitem__(self, index):
        _check_index(index, len(self._tickets))
        return self._tickets[index]

    def __len__(self):
        return len(self._tickets)

    def __iter__(self):
        return iter(self._tickets)

    def append(self, ticket):
        """Add a ticket at the end of the list."""
        self._tickets.append(ticket)

    def is_booked(self, train_number, car, seat):
        """Tell whether a ticket exists for this seat in this car of this train."""
        return any(
            ticket.seat == seat
            and ticket.train.number == train_number
            and ticket.train.cars == car
            for ticket in self._tickets
        )

    def total(self):
        """Return the sum of the ticket prices."""
        return sum(self._tickets)

    def save(self, path):
        """Write the list to a file, tab separated, starting with the count."""
        with open(path, "w", encoding="utf-8") as file:
            file.write(f"{len(self._tickets)}\t")
            for ticket in self._tickets:
                fields = (
                    ticket.train.number,
                    ticket.train.cars,
                    ticket.seat,
                    ticket.departure_time,
                    ticket.arrival_time,
                    ticket.from_station,
                    ticket.to_station,
                    ticket.price,
                )
                file.write("".join(f"{field}\t" for field in fields))

    def load(self, path):
        """Replace the contents with the list saved in a file."""
        with open(path, encoding="utf-8") as file:
            words = _words(file)
            count = _read_count(words)
            tickets = []
            for _ in range(count):
                number = _next_int(words)
                cars = _next_int(words)
                seat = _next_int(words)
                departure = _next_word(words)
                arrival = _next_word(words)
                from_station = _next_word(words)
                to_station = _next_word(words)
                price = _next_int(words)
                tickets.append(
                    Ticket(
                        Train(number, cars),
                        seat,
                        departure,
                        arrival,
                        from_station,
                        to_station,
                        price,
                    )
                )
        self._tickets = tickets