from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import pytest

from lazyseq import Seq


@dataclass(slots=True)
class Tracker:
    """Records how a source was driven: runs started, values produced, runs released."""

    started: int = 0
    produced: int = 0
    released: int = 0

    def counting(self, start: int = 0) -> Seq[int]:
        """Infinite counter from start that reports into this tracker."""

        def run() -> Iterator[int]:
            self.started += 1
            i = start
            try:
                while True:
                    self.produced += 1
                    yield i
                    i += 1
            finally:
                self.released += 1

        return Seq(run, name="tracked.counting")

    def finite[T](self, items: Iterable[T]) -> Seq[T]:
        """Finite source over items that reports into this tracker."""
        snapshot = list(items)

        def run() -> Iterator[T]:
            self.started += 1
            try:
                for item in snapshot:
                    self.produced += 1
                    yield item
            finally:
                self.released += 1

        return Seq(run, name="tracked.finite")


@pytest.fixture
def tracker() -> Tracker:
    return Tracker()


@pytest.fixture
def other_tracker() -> Tracker:
    return Tracker()
