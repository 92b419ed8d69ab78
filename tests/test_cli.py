import io
import re

import pytest

from vonatjegy.cli import MENU, main, run


def _run(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def _totals(output):
    return [int(value) for value in re.findall(r"A jegyek osszerteke: (\d+)", output)]


def test_exit_shows_menu_once():
    output = _run("0\n")
    assert output == MENU


def test_end_of_input_stops():
    output = _run("")
    assert output == MENU


def test_unknown_choice_shows_menu_again():
    output = _run("9\n0\n")
    assert output.count("Mit kivan tenni?") == 2


def test_existing_train_is_rejected():
    output = _run("1\n1\n0\n")
    assert "Mar van ilyen vonat a nyilvantartasban!" in output


def test_too_many_cars_is_rejected():
    output = _run("1\n7\n60\n0\n")
    assert "Nem huzhat tobbet 50 kocsinal!" in output
    assert "Jarat letrehozva!" not in output


def test_new_train_is_created_and_then_known():
    output = _run("1\n7\n10\n1\n7\n0\n")
    assert "Jarat letrehozva!" in output
    assert output.index("Jarat letrehozva!") < output.index(
        "Mar van ilyen vonat a nyilvantartasban!"
    )


def test_buying_a_ticket_adds_unit_price():
    booking = "2\n7\n3\n12\nBudapest\nGyor\n10:00\n12:00\n"
    output = _run("3\n" + booking + "3\n0\n")
    assert "A helyet lefoglaltuk a szamodra!" in output
    before, after = _totals(output)
    assert after - before == 4500


def test_same_seat_cannot_be_booked_twice():
    booking = "2\n7\n3\n12\nBudapest\nGyor\n10:00\n12:00\n"
    output = _run(booking + "2\n7\n3\n12\n0\n")
    assert output.count("A helyet lefoglaltuk a szamodra!") == 1
    assert "Sajnos ez a hely mar foglalt!" in output


def test_invalid_number_is_reported():
    output = _run("1\nabc\n0\n")
    assert "Hibas bemenet!" in output
    assert output.count("Mit kivan tenni?") == 2


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0\n"))
    assert main([]) == 0
    assert "A jegyek osszerteke:" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2