"""Interactive ticket office on the terminal."""

import argparse
import sys

from .registry import TicketList, TrainList, read_word
from .ticket import Ticket
from .train import Train

UNIT_PRICE = 4500
MAX_CARS = 50
INITIAL_SIZE = 10

MENU = (
    "--------------------------------------\n"
    "Mit kivan tenni?\n"
    "Uj jarat felvetele:\t\t(1)\n"
    "Jegy vasarlasa:\t\t\t(2)\n"
    "Jegyek osszegzese:\t\t(3)\n"
    "Kilepes:\t\t\t(0)\n"
    "--------------------------------------\n"
)


class _EndOfInput(Exception):
    pass


class _Console:
    def __init__(self, stdin, stdout):
        self._in = stdin
        self._out = stdout

    def write(self, text):
        self._out.write(text)

    def char(self):
        while True:
            ch = self._in.read(1)
            if not ch:
                raise _EndOfInput
            if not ch.isspace():
                return ch

    def word(self):
        word = read_word(self._in)
        if not word:
            raise _EndOfInput
        return word

    def integer(self):
        return int(self.word())


def _add_train(console, trains):
    console.write("A jarat szama? : ")
    number = console.integer()
    if trains.index_of(number) >= 0:
        console.write("Mar van ilyen vonat a nyilvantartasban!\n")
        return
    console.write("Mennyi kocsit huz? : ")
    cars = console.integer()
    if cars > MAX_CARS:
        console.write(f"Nem huzhat tobbet {MAX_CARS} kocsinal!\n")
        return
    console.write("\n")
    trains.append(Train(number, cars))
    console.write("Jarat letrehozva!\n")


def _sell_ticket(console, tickets):
    console.write("Melyik Jaraton?\n")
    number = console.integer()
    console.write("Melyik melyik kocsiba?\n")
    car = console.integer()
    console.write("Melyik helyre?\n")
    seat = console.integer()
    if tickets.is_booked(number, car, seat):
        console.write("Sajnos ez a hely mar foglalt!\n")
        return
    console.write("Melyik allomasrol?\n")
    from_station = console.word()
    console.write("Melyik allomasra?\n")
    to_station = console.word()
    console.write("Mikortol?\n")
    departure = console.word()
    console.write("Meddig?\n")
    arrival = console.word()
    tickets.append(
        Ticket(Train(number, car), seat, departure, arrival, from_station, to_station)
    )
    console.write("A helyet lefoglaltuk a szamodra!\n")


def _summarise(console, tickets):
    console.write(f"A jegyek osszerteke: {tickets.total() * UNIT_PRICE}\n")


def run(stdin=None, stdout=None):
    """Run the menu loop until the user chooses 0 or the input ends."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    trains = TrainList(INITIAL_SIZE)
    tickets = TicketList(INITIAL_SIZE)
    actions = {
        "1": lambda: _add_train(console, trains),
        "2": lambda: _sell_ticket(console, tickets),
        "3": lambda: _summarise(console, tickets),
    }
    try:
        while True:
            console.write(MENU)
            choice = console.char()
            if choice == "0":
                break
            action = actions.get(choice)
            if action is None:
                continue
            try:
                action()
            except ValueError:
                console.write("Hibas bemenet!\n")
    except _EndOfInput:
        pass


def main(argv=None):
    """Start the interactive ticket office."""
    parser = argparse.ArgumentParser(
        prog="vonatjegy", description="Interactive train ticket office."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())