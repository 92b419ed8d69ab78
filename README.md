# vonatjegy

A small ticket office for trains. It keeps a list of trains, each with a
service number and a number of cars. It sells tickets for a given seat in a
given car of a given train, refuses seats that are already booked, and totals
the value of the tickets sold.

## Installation

```
pip install .
```

## Interactive use

Start the menu-driven office:

```
vonatjegy
```

The menu prompts are in Hungarian. It offers:

- `1`: register a new train. You give the service number and then the number
  of cars. A number that is already registered is refused, and so is more
  than 50 cars.
- `2`: buy a ticket. You give the train, car and seat, then the departure and
  arrival stations and times. A seat that is already booked is refused.
- `3`: show the total value of the tickets, which is the sum of the ticket
  prices multiplied by 4500.
- `0`: quit. The office also quits when the input ends.

The office starts with 10 default trains and 10 default tickets. Each default
train has number 1 and 1 car. Each default ticket is for seat 1 in car 1 of
train 1 and has price 1. A ticket bought from the menu has price 1. A number
that cannot be read prints `Hibas bemenet!` and the menu is shown again.

`vonatjegy.cli.run(stdin, stdout)` runs the same loop on any pair of text
streams.

## Library use

```python
from vonatjegy.train import Train
from vonatjegy.ticket import Ticket
from vonatjegy.registry import TrainList, TicketList

trains = TrainList(0)
trains.append(Train(101, 8))
print(trains.index_of(101))        # 0, or -1 if the service is unknown

tickets = TicketList(0)
tickets.append(Ticket(Train(101, 8), 12, "08:15", "10:40", "Budapest", "Szeged", 4500))
print(tickets.is_booked(101, 8, 12))  # True
print(tickets.total())                # sum of the ticket prices

tickets.save("tickets.txt")
restored = TicketList(0)
restored.load("tickets.txt")
```

`TrainList(size)` and `TicketList(size)` start out holding `size` default
entries. Indexing outside the list raises `IndexError`.

Both lists are saved as tab-separated plain text. The number of entries comes
first, then the fields of every entry. Text fields are read back one
whitespace-delimited word each, so they must not contain spaces.
`vonatjegy.registry.read_word` reads such a word from a stream. Loading raises
`vonatjegy.registry.FormatError` in these cases:

- the count is missing, unreadable or negative
- the file ends before the last entry is complete
- a numeric field is not a number

A file that cannot be opened raises the usual `OSError`.

The `Train` and `Ticket` constructors store their values as given. Assigning
to the properties applies these rules:

- `Train.number`: a negative value becomes 0.
- `Train.cars`: a negative value is ignored.
- `Ticket.seat`: a negative value becomes 1, and a value above 50 becomes 50.

Adding a ticket to an integer adds its price, so `sum(tickets)` works.

## Extras

- `vonatjegy.checks`: a lightweight check runner, `CheckRunner`. Its `begin`,
  `end`, `expect`, `expect_that`, `expect_regexp`, `expect_raises` and
  `summary` methods report to a text stream. The module also provides
  comparison predicates: `eq`, `ne`, `le`, `lt`, `ge`, `gt`, `eqstr`, `nestr`,
  `eqstrcase`, `nestrcase`, `almost_eq` and `count_regexp`.
- `vonatjegy.memtrace`: a block allocation tracer, `MemoryTracer`.
  - It hands out `Block` objects guarded by canary bytes.
  - It raises `TraceError` when a block is unknown or already released, when
    it is released with a mismatched `Allocator`, or when its canaries are
    damaged.
  - `check()` reports leaked blocks.
  - `hexdump` formats bytes as a hex and character dump.

## Limitations

- The interactive office keeps everything in memory. It does not save or load
  trains or tickets between runs; saving and loading are only available
  through the library.
- Tickets sold from the menu are not checked against the registered trains.

## Running the tests

```
pip install .[test]
pytest
```