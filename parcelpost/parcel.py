"""Parcels in transit and the file they are kept in."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, MutableSequence, Sequence

_RECORD_FIELDS = 7


class ParcelError(Exception):
    """Raised when a parcel cannot be found, handed over, stored or read."""


@dataclass
class Parcel:
    """A parcel travelling from one post office to another."""

    sender: str
    recipient: str
    origin: int
    destination: int
    weight: int
    track_id: int
    remaining_time: int = 0

    def describe(self) -> str:
        """Return the human-readable summary of the parcel."""
        return (
            f"Имя отправителя: {self.sender}, "
            f"Имя получателя: {self.recipient}, "
            f"Отправочное отделение: {self.origin}, "
            f"Приемное отделение: {self.destination}, "
            f"Трек номер: {self.track_id}, "
            f"Вес: {self.weight} кг"
        )

    def to_record(self) -> str:
        """Return the parcel as one whitespace-separated record."""
        for name in (self.sender, self.recipient):
            if not name or any(ch.isspace() for ch in name):
                raise ParcelError(f"name cannot be stored: {name!r}")
        return " ".join(
            str(value)
            for value in (
                self.sender,
                self.recipient,
                self.origin,
                self.destination,
                self.track_id,
                self.weight,
                self.remaining_time,
            )
        )

    @classmethod
    def from_record(cls, line: str) -> Parcel:
        """Parse a record written by :meth:`to_record`."""
        fields = line.split()
        if len(fields) != _RECORD_FIELDS:
            raise ParcelError(f"malformed parcel record: {line!r}")
        return cls._from_fields(fields)

    @classmethod
    def _from_fields(cls, fields: Sequence[str]) -> Parcel:
        sender, recipient, *numbers = fields
        try:
            origin, destination, track_id, weight, remaining = (int(v) for v in numbers)
        except ValueError as exc:
            raise ParcelError(f"malformed parcel record: {' '.join(fields)!r}") from exc
        return cls(sender, recipient, origin, destination, weight, track_id, remaining)

    def tick(self) -> bool:
        """Let one day pass; return True if the parcel was still on its way."""
        if self.remaining_time > 0:
            self.remaining_time -= 1
            return True
        return False


def load_parcels(path: str | Path) -> list[Parcel]:
    """Read the parcel store: a count followed by that many records."""
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except OSError as exc:
        raise ParcelError("Не удалось открыть файл для чтения.") from exc
    stream = iter(tokens)
    try:
        count = int(next(stream))
    except (StopIteration, ValueError) as exc:
        raise ParcelError("parcel count is missing or malformed") from exc
    if count < 0:
        raise ParcelError(f"negative parcel count: {count}")
    parcels = []
    for number in range(1, count + 1):
        fields = list(islice(stream, _RECORD_FIELDS))
        if len(fields) != _RECORD_FIELDS:
            raise ParcelError(f"Ошибка чтения данных для посылки #{number}")
        try:
            parcels.append(Parcel._from_fields(fields))
        except ParcelError as exc:
            raise ParcelError(f"Ошибка чтения данных для посылки #{number}") from exc
    return parcels


def save_parcels(path: str | Path, parcels: Sequence[Parcel]) -> None:
    """Write the parcel store, replacing what was there."""
    lines = [str(len(parcels))]
    lines.extend(parcel.to_record() for parcel in parcels)
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def find_parcel(parcels: Iterable[Parcel], track_id: int) -> Parcel:
    """Return the first parcel with this tracking number."""
    for parcel in parcels:
        if parcel.track_id == track_id:
            return parcel
    raise ParcelError("Посылка с таким трек номером не найдена.")


def remove_parcel(parcels: MutableSequence[Parcel], track_id: int) -> Parcel:
    """Remove and return the first parcel with this tracking number."""
    for position, parcel in enumerate(parcels):
        if parcel.track_id == track_id:
            del parcels[position]
            return parcel
    raise ParcelError("Такого трек номера не существует")


def hand_over(parcels: MutableSequence[Parcel], track_id: int, recipient: str) -> Parcel:
    """Give a parcel to its recipient, removing it from the list.

    The recipient is checked against the last parcel carrying the number,
    and the first such parcel is the one removed.
    """
    matches = [parcel for parcel in parcels if parcel.track_id == track_id]
    if not matches:
        raise ParcelError("Такого трек номера не существует")
    if matches[-1].recipient != recipient:
        raise ParcelError(f"recipient {recipient!r} does not match parcel {track_id}")
    return remove_parcel(parcels, track_id)


def advance_time(parcels: Iterable[Parcel]) -> list[tuple[Parcel, bool]]:
    """Let one day pass for every parcel; pair each with whether it moved."""
    return [(parcel, parcel.tick()) for parcel in parcels]