from __future__ import annotations

from _infra import banner, run

from kungfu import Ok, Result

from lazyseq import fibs, flow, numbers, numbers_from, pull


def add(acc: int, value: int) -> Result[int, str]:
    return Ok(acc + value)


def main() -> None:
    banner("flow: limit + reduce")
    print(flow(numbers_from(1)).limit(100).reduce(add, initial=0))

    banner("flow: zip + limit + tap")
    (
        flow(numbers())
        .zip(fibs())
        .limit(10)
        .tap(lambda i, f: print(f"fib({i}) = {f}"))
        .for_each(lambda i, f: True)
    )

    banner("pull: explicit cursor")
    with pull(fibs()) as cursor:
        print([next(cursor) for _ in range(5)])
        print(cursor)
    print(cursor, cursor.take())


if __name__ == "__main__":
    run(main)
