import io

import pytest

from vonatjegy.registry import FormatError, TicketList, TrainList, read_word
from vonatjegy.ticket import Ticket
from vonatjegy.train import Train


def test_read_word_splits_on_whitespace():
    stream = io.StringIO("  hello\tworld\n")
    assert read_word(stream) == "hello"
    assert read_word(stream) == "world"
    assert read_word(stream) == ""


def test_read_word_empty_stream():
    assert read_word(io.StringIO("   \n")) == ""


def test_train_list_starts_with_default_trains():
    trains = TrainList(4)
    assert len(trains) == 4
    assert all(train == Train(1, 1) for train in trains)


@pytest.mark.parametrize("index", [-1, 3])
def test_train_list_index_out_of_range(index):
    with pytest.raises(IndexError):
        TrainList(3)[index]


def test_train_list_append_grows():
    trains = TrainList(2)
    trains.append(Train(9, 4))
    assert len(trains) == 3
    assert trains[2] == Train(9, 4)


def test_train_list_index_of():
    trains = TrainList(2)
    trains.append(Train(9, 4))
    assert trains.index_of(9) == 2
    assert trains.index_of(1) == 0
    assert trains.index_of(77) == -1


def test_train_list_save_format(tmp_path):
    trains = TrainList(0)
    trains.append(Train(5, 3))
    trains.append(Train(7, 4))
    path = tmp_path / "trains.txt"
    trains.save(path)
    assert path.read_text(encoding="utf-8") == "2\t5\t3\t7\t4\t"


def test_train_list_round_trip(tmp_path):
    trains = TrainList(1)
    trains.append(Train(12, 30))
    path = tmp_path / "trains.txt"
    trains.save(path)
    loaded = TrainList(5)
    loaded.load(path)
    assert list(loaded) == list(trains)


def test_train_list_load_bad_size(tmp_path):
    path = tmp_path / "trains.txt"
    path.write_text("abc\t", encoding="utf-8")
    with pytest.raises(FormatError):
        TrainList().load(path)


def test_train_list_load_negative_size(tmp_path):
    path = tmp_path / "trains.txt"
    path.write_text("-2\t", encoding="utf-8")
    with pytest.raises(FormatError):
        TrainList().load(path)


def test_train_list_load_truncated(tmp_path):
    path = tmp_path / "trains.txt"
    path.write_text("2\t5\t3\t7\t", encoding="utf-8")
    trains = TrainList(3)
    with pytest.raises(FormatError):
        trains.load(path)
    assert len(trains) == 3


def test_train_list_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TrainList().load(tmp_path / "missing.txt")


def test_ticket_list_is_booked():
    tickets = TicketList(0)
    tickets.append(Ticket(Train(7, 3), 12))
    assert tickets.is_booked(7, 3, 12)
    assert not tickets.is_booked(7, 3, 13)
    assert not tickets.is_booked(7, 4, 12)
    assert not tickets.is_booked(8, 3, 12)


def test_default_tickets_are_booked_on_first_seat():
    assert TicketList(2).is_booked(1, 1, 1)


def test_ticket_list_total():
    tickets = TicketList(0)
    first = Ticket(price=300)
    second = Ticket(price=700)
    tickets.append(first)
    tickets.append(second)
    assert tickets.total() == first.price + second.price


def test_empty_ticket_list_total():
    assert TicketList(0).total() == 0


def test_ticket_list_index_out_of_range():
    with pytest.raises(IndexError):
        TicketList(2)[2]


def test_ticket_list_round_trip(tmp_path):
    tickets = TicketList(1)
    tickets.append(Ticket(Train(7, 3), 12, "10:00", "12:30", "Budapest", "Gyor", 900))
    path = tmp_path / "tickets.txt"
    tickets.save(path)
    loaded = TicketList(0)
    loaded.load(path)
    assert len(loaded) == 2
    assert list(loaded) == list(tickets)


def test_ticket_list_save_starts_with_count(tmp_path):
    tickets = TicketList(3)
    path = tmp_path / "tickets.txt"
    tickets.save(path)
    text = path.read_text(encoding="utf-8")
    assert text.split("\t")[0] == "3"
    assert text.count("Default") == 12


def test_ticket_list_load_bad_number(tmp_path):
    path = tmp_path / "tickets.txt"
    path.write_text("1\t7\t3\tx\ta\tb\tc\td\t5\t", encoding="utf-8")
    with pytest.raises(FormatError):
        TicketList().load(path)