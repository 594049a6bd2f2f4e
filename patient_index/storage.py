"""
Patient Index — Сховище (джерело та приймачі даних)

Абстракція потоку байтів над локальною файловою системою.
Будь-які OSError / UnicodeDecodeError перетворюються на StorageError
з першопричиною в __cause__. Потоки закриваються і при успіху, і при помилці.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from patient_index.errors import StorageError

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Локальна файлова система.

    Приклад використання:
        storage = LocalStorage()
        with storage.open_source("data/patients.csv") as source:
            header = source.readline()

        target = storage.join("out", "region_output.json")
        with storage.open_sink(target) as sink:
            sink.write("[]")
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def join(self, location: str, name: str) -> str:
        return str(Path(location) / name)

    @contextmanager
    def open_source(self, location: str) -> Iterator[TextIO]:
        """Відкрити джерело для читання рядків"""
        try:
            # newline="" залишає \r\n всередині полів у лапках як є
            with open(location, "r", encoding=self.encoding, newline="") as stream:
                logger.debug(f"Opened source {location}")
                yield stream
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {location}", location=location) from e

    @contextmanager
    def open_sink(self, location: str) -> Iterator[TextIO]:
        """Відкрити приймач для запису, створивши каталог за потреби"""
        try:
            Path(location).parent.mkdir(parents=True, exist_ok=True)
            with open(location, "w", encoding=self.encoding, newline="\n") as stream:
                logger.debug(f"Opened sink {location}")
                yield stream
        except OSError as e:
            raise StorageError(f"Cannot write {location}", location=location) from e

    def __repr__(self) -> str:
        return f"LocalStorage(encoding={self.encoding!r})"
