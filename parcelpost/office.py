"""Post offices and the file that lists them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from parcelpost.parcel import Parcel

_DISTANCE_PER_DAY = 10


class OfficeError(Exception):
    """Raised when an office cannot be found, read or stored."""


@dataclass
class Office:
    """A post office with its coordinates and the parcels it holds."""

    index: int
    x: int
    y: int
    parcels: list[int] = field(default_factory=list)

    def to_line(self) -> str:
        """Return the office as one line of the office list."""
        return " ".join(str(value) for value in (self.index, self.x, self.y, *self.parcels))

    @classmethod
    def from_line(cls, line: str) -> Office:
        """Parse a line written by :meth:`to_line`."""
        try:
            index, x, y, *parcels = (int(token) for token in line.split())
        except ValueError as exc:
            raise OfficeError(f"malformed office line: {line!r}") from exc
        return cls(index, x, y, parcels)

    def describe(self, number: int) -> str:
        """Return the listing entry of the office under the given number."""
        tracks = ", ".join(str(track) for track in self.parcels)
        return (
            f"{number}. Индекс почтового отделения: {self.index}, "
            f"Координата X: {self.x}, "
            f"Координата Y: {self.y}, {tracks}"
        )


def read_offices(path: str | Path) -> list[Office]:
    """Read every office from the list, skipping blank lines."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise OfficeError("Не удалось открыть файл.") from exc
    return [Office.from_line(line) for line in text.splitlines() if line.strip()]


def write_offices(path: str | Path, offices: Iterable[Office]) -> None:
    """Write the office list, replacing what was there."""
    Path(path).write_text("".join(f"{office.to_line()}\n" for office in offices), encoding="utf-8")


def append_office(path: str | Path, office: Office) -> None:
    """Add one office to the end of the list."""
    try:
        with open(path, "a", encoding="utf-8") as stream:
            stream.write(f"{office.to_line()}\n")
    except OSError as exc:
        raise OfficeError("Не удалось открыть файл для записи") from exc


def delete_office(
    path: str | Path, number: int, parcels: Sequence[Parcel]
) -> tuple[Office, list[Parcel]]:
    """Remove the office listed under ``number`` (from 1).

    Every parcel the office held is sent back to its origin. Returns the
    removed office and the parcels that were sent back.
    """
    offices = read_offices(path)
    if not 1 <= number <= len(offices):
        raise OfficeError("Неверный номер отделения.")
    removed = offices.pop(number - 1)
    returned = []
    for track in removed.parcels:
        for parcel in parcels:
            if parcel.track_id == track:
                parcel.destination = parcel.origin
                returned.append(parcel)
    write_offices(path, offices)
    return removed, returned


def delivery_days(offices: Iterable[Office], origin: int, destination: int) -> int:
    """Days a parcel needs between two offices, at ten units a day."""
    start = end = None
    for office in offices:
        if office.index == origin:
            start = office
        if office.index == destination:
            end = office
        if start is not None and end is not None:
            break
    if start is None or end is None:
        raise OfficeError("Ошибка: одно из отделений не найдено.")
    distance = math.hypot(end.x - start.x, end.y - start.y)
    return math.ceil(distance / _DISTANCE_PER_DAY)