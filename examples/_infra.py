from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from lazyseq import Seq  # noqa: E402


@dataclass(slots=True)
class Probe:
    """Counts how far a source got and whether its run was released."""

    produced: int = 0
    released: int = 0

    def watch[T](self, seq: Seq[T]) -> Seq[T]:
        def run() -> Iterator[T]:
            try:
                for value in seq:
                    self.produced += 1
                    yield value
            finally:
                self.released += 1

        return Seq(run, name=f"watched({seq!r})")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
