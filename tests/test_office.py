import pytest

from parcelpost.office import (
    Office,
    OfficeError,
    append_office,
    delete_office,
    delivery_days,
    read_offices,
    write_offices,
)
from parcelpost.parcel import Parcel


def test_line_round_trip():
    office = Office(101, 3, -4, [7, 8])
    assert Office.from_line(office.to_line()) == office


def test_line_without_parcels():
    office = Office.from_line("101 3 4")
    assert office == Office(101, 3, 4, [])
    assert office.to_line() == "101 3 4"


@pytest.mark.parametrize("line", ["", "101 3", "101 x 4", "101 3 4 seven"])
def test_from_line_rejects_malformed(line):
    with pytest.raises(OfficeError):
        Office.from_line(line)


def test_describe_matches_source_format():
    assert Office(101, 3, 4, [7, 8]).describe(1) == (
        "1. Индекс почтового отделения: 101, Координата X: 3, Координата Y: 4, 7, 8"
    )


def test_write_and_read_round_trip(tmp_path):
    path = tmp_path / "posts.txt"
    offices = [Office(1, 0, 0, [5]), Office(2, 10, 20)]
    write_offices(path, offices)
    assert read_offices(path) == offices


def test_read_skips_blank_lines(tmp_path):
    path = tmp_path / "posts.txt"
    path.write_text("1 0 0\n\n2 5 5 9\n", encoding="utf-8")
    assert read_offices(path) == [Office(1, 0, 0), Office(2, 5, 5, [9])]


def test_read_missing_file(tmp_path):
    with pytest.raises(OfficeError):
        read_offices(tmp_path / "absent.txt")


def test_append_office_adds_to_end(tmp_path):
    path = tmp_path / "posts.txt"
    append_office(path, Office(1, 0, 0))
    append_office(path, Office(2, 3, 4, [6]))
    assert read_offices(path) == [Office(1, 0, 0), Office(2, 3, 4, [6])]


def test_delete_office_sends_parcels_back(tmp_path):
    path = tmp_path / "posts.txt"
    write_offices(path, [Office(1, 0, 0), Office(2, 5, 5, [42]), Office(3, 9, 9)])
    held = Parcel("Ann", "Bob", 1, 2, 5, 42)
    other = Parcel("Eve", "Dan", 3, 2, 1, 43)
    removed, returned = delete_office(path, 2, [held, other])
    assert removed == Office(2, 5, 5, [42])
    assert returned == [held]
    assert held.destination == held.origin
    assert other.destination == 2
    assert read_offices(path) == [Office(1, 0, 0), Office(3, 9, 9)]


@pytest.mark.parametrize("number", [0, 3, -1])
def test_delete_office_rejects_bad_number(tmp_path, number):
    path = tmp_path / "posts.txt"
    offices = [Office(1, 0, 0), Office(2, 5, 5)]
    write_offices(path, offices)
    with pytest.raises(OfficeError):
        delete_office(path, number, [])
    assert read_offices(path) == offices


def test_delivery_days_three_four_five():
    offices = [Office(1, 0, 0), Office(2, 30, 40)]
    assert delivery_days(offices, 1, 2) == 5


def test_delivery_days_rounds_up():
    offices = [Office(1, 0, 0), Office(2, 1, 0)]
    assert delivery_days(offices, 1, 2) == 1


def test_delivery_days_is_symmetric():
    offices = [Office(1, 2, 7), Office(2, -13, 44), Office(3, 5, 5)]
    assert delivery_days(offices, 1, 2) == delivery_days(offices, 2, 1)


def test_delivery_days_same_office():
    offices = [Office(1, 2, 7)]
    assert delivery_days(offices, 1, 1) == 0


def test_delivery_days_missing_office():
    with pytest.raises(OfficeError):
        delivery_days([Office(1, 0, 0)], 1, 2)