"""Interactive menu for sending, tracking and handing over parcels."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path
from typing import Callable, TextIO

from parcelpost.office import (
    Office,
    OfficeError,
    append_office,
    delete_office,
    delivery_days,
    read_offices,
)
from parcelpost.parcel import (
    Parcel,
    ParcelError,
    advance_time,
    find_parcel,
    hand_over,
    load_parcels,
    save_parcels,
)

PARCELS_FILE = "packages.txt"
OFFICES_FILE = "posts.txt"

MENU = (
    "1. Отправить посылку\n"
    "2. Добавить отделение\n"
    "3. Удалить отделение\n"
    "4. Узнать информацию о отделении\n"
    "5. Отследить посылку по трек номеру\n"
    "6. Выдать посылку\n"
    "7.Пропуск времени \n"
    "0. Выйти\n"
)


class _InputEnded(Exception):
    """The input stream has no more data."""


class _BadInput(Exception):
    """A token could not be read as the expected value."""


class _Reader:
    """Reads whitespace-separated tokens, and whole lines when asked to wait."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise _InputEnded
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self) -> int:
        text = self.token()
        try:
            return int(text)
        except ValueError as exc:
            raise _BadInput(text) from exc

    def wait_for_enter(self) -> bool:
        """Drop the rest of the current line and wait for the next one."""
        self._pending.clear()
        return bool(self._stream.readline())


class _Session:
    def __init__(self, reader: _Reader, output: TextIO, directory: Path) -> None:
        self.reader = reader
        self.output = output
        self.parcels_path = directory / PARCELS_FILE
        self.offices_path = directory / OFFICES_FILE
        self.parcels: list[Parcel] = self._load()

    def say(self, text: str = "") -> None:
        self.output.write(f"{text}\n")

    def ask(self, prompt: str) -> None:
        self.output.write(prompt)

    def _load(self) -> list[Parcel]:
        if not self.parcels_path.exists():
            return []
        try:
            return load_parcels(self.parcels_path)
        except ParcelError as exc:
            self.say(str(exc))
            return []

    def _offices(self) -> list[Office]:
        return read_offices(self.offices_path)

    def send(self) -> None:
        self.ask("Введите имя отправителя: ")
        sender = self.reader.token()
        self.ask("Введите имя получателя: ")
        recipient = self.reader.token()
        self.ask("Введите отправочное отделение: ")
        origin = self.reader.integer()
        self.ask("Введите приемное отделение: ")
        destination = self.reader.integer()
        self.ask("Введите трек-номер: ")
        track_id = self.reader.integer()
        self.ask("Введите вес: ")
        weight = self.reader.integer()
        try:
            days = delivery_days(self._offices(), origin, destination)
        except OfficeError as exc:
            self.say(str(exc))
            return
        self.say(f"Время доставки: {days} дней")
        self.parcels.append(
            Parcel(sender, recipient, origin, destination, weight, track_id, days)
        )

    def add_office(self) -> None:
        self.ask("Введите название нового почтового отделения: ")
        self.reader.token()
        self.ask("Введите индекс нового почтового отделения: ")
        index = self.reader.integer()
        self.ask("Введите координату X нового почтового отделения: ")
        x = self.reader.integer()
        self.ask("Введите координату Y нового почтового отделения: ")
        y = self.reader.integer()
        try:
            append_office(self.offices_path, Office(index, x, y))
        except OfficeError as exc:
            self.say(f"{exc}\n")
            return
        self.say("Почтовое отделение добавлено успешно\n")

    def delete_office(self) -> None:
        try:
            offices = self._offices()
        except OfficeError:
            offices = []
        self.say("Список почтовых отделений:")
        for number, office in enumerate(offices, start=1):
            self.say(f"{number}) {office.to_line()}")
        self.ask("Введите номер отделения для удаления: ")
        number = self.reader.integer()
        try:
            _, returned = delete_office(self.offices_path, number, self.parcels)
        except OfficeError:
            self.say("Неверный номер отделения.")
            return
        for parcel in returned:
            self.say(
                f"Посылка с трек-номером {parcel.track_id} "
                f"отправлена обратно в отделение {parcel.origin}"
            )
        save_parcels(self.parcels_path, self.parcels)
        self.say("Отделение успешно удалено. Все посылки отправлены обратно.")

    def display(self) -> None:
        try:
            offices = self._offices()
        except OfficeError as exc:
            self.say(str(exc))
            return
        for number, office in enumerate(offices, start=1):
            self.say(office.describe(number))
        self.say("---------------")

    def track(self) -> None:
        self.ask("Введите трек номер посылки для отслеживания: ")
        track_id = self.reader.integer()
        try:
            parcel = find_parcel(self.parcels, track_id)
            remaining = delivery_days(self._offices(), parcel.origin, parcel.destination)
        except (ParcelError, OfficeError) as exc:
            self.say(str(exc))
            return
        self.say(f"Время доставки: {remaining} дней")
        self.say(f"Время до пункта назначения: {remaining} единиц времени.")
        while remaining > 0:
            self.say(f"Осталось времени: {remaining} единиц времени.")
            self.ask("Нажмите Enter для прокрутки времени на 1 единицу...")
            if not self.reader.wait_for_enter():
                raise _InputEnded
            remaining -= 1
        self.say("Посылка достигла пункта назначения!")

    def give(self) -> None:
        self.ask("Введите трек номер: ")
        track_id = self.reader.integer()
        self.say("Введите имя получателя: ")
        recipient = self.reader.token()
        try:
            hand_over(self.parcels, track_id, recipient)
        except ParcelError as exc:
            self.say(str(exc))
            return
        self.say("Поссылка получена!")
        self.say("Посылка удалена.")

    def advance(self) -> None:
        for parcel, moved in advance_time(self.parcels):
            before = parcel.remaining_time + 1 if moved else parcel.remaining_time
            self.say(f"time:{before}")
            if moved:
                self.say(
                    f"Посылка с трек-номером {parcel.track_id} "
                    f"осталось времени: {parcel.remaining_time} дней"
                )
            else:
                self.say(f"Посылка с трек-номером {parcel.track_id} уже доставлена.")

    def save(self) -> None:
        save_parcels(self.parcels_path, self.parcels)


def run(input_stream: TextIO, output: TextIO, directory: str | Path = ".") -> int:
    """Run the menu until the user chooses to leave or input runs out."""
    session = _Session(_Reader(input_stream), output, Path(directory))
    actions: dict[int, Callable[[], None]] = {
        1: session.send,
        2: session.add_office,
        3: session.delete_office,
        4: session.display,
        5: session.track,
        6: session.give,
        7: session.advance,
    }
    while True:
        output.write(MENU)
        try:
            choice = session.reader.integer()
            if choice == 0:
                session.say("Выход из программы.")
                break
            action = actions.get(choice)
            if action is None:
                session.say("Неверный ввод. Пожалуйста, попробуйте снова.")
                continue
            action()
        except _BadInput:
            session.say("Неверный ввод. Пожалуйста, попробуйте снова.")
        except _InputEnded:
            break
    session.save()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Parcel post office desk.")
    parser.add_argument(
        "--dir",
        default=".",
        help="directory holding the parcel and office files",
    )
    args = parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, args.dir)


if __name__ == "__main__":
    sys.exit(main())