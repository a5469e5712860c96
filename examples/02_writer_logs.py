from __future__ import annotations

from _infra import Probe, banner, run

from kungfu import Error, Ok

from lazyseq import Log, WriterResult, flow, numbers_from, writer_error, writer_ok


def add_small(acc: int, value: int) -> WriterResult[int, str, Log[str]]:
    """
    "Pure" writer step: returns the new total plus what it saw.
    """
    if value > 5:
        return writer_error(f"{value} is too big", f"reject {value}")
    return writer_ok(acc + value, f"add {value} -> {acc + value}")


def main() -> None:
    banner("reduce_w: fold with a log, stopping at the first rejection")

    probe = Probe()
    wr = flow(probe.watch(numbers_from(1))).reduce_w(add_small, initial=0)

    match wr.result:
        case Ok(total):
            print(f"ok: {total}")
        case Error(failure):
            print(f"error: {failure.error} (partial={failure.partial}, index={failure.index})")
    print(f"log: {list(wr.log)!r}")
    print(f"source produced {probe.produced} values, released {probe.released} time(s)")


if __name__ == "__main__":
    run(main)
