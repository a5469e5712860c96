from __future__ import annotations

from _infra import banner, run

from lazyseq import fibs, indexed, limit, limit2, numbers, values, zip_seq


def main() -> None:
    banner("limit on an infinite counter")
    for i in limit(numbers(), 3):
        print(i)

    banner("limit on a collection")
    for letter in limit(values(["a", "b", "c", "d"]), 3):
        print(letter)

    banner("limit2 on (index, item) pairs")
    for i, letter in limit2(indexed(["a", "b", "c", "d"]), 3):
        print(i, letter)

    banner("zip stops at the shorter side")
    for i, letter in zip_seq(numbers(), values(["a", "b", "c", "d"])):
        print(i, letter)

    banner("fibs")
    for i, f in zip_seq(numbers(), limit(fibs(), 200)):
        print(i, f)


if __name__ == "__main__":
    run(main)
