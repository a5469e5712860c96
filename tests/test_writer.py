from kungfu import Error, Ok

from lazyseq import Log, WriterResult, writer_error, writer_ok


class TestLog:
    """Monoid operations never modify their operands"""

    def test_of(self):
        assert list(Log.of("a", "b")) == ["a", "b"]

    def test_combine(self):
        left, right = Log.of(1), Log.of(2, 3)
        merged = left.combine(right)
        assert list(merged) == [1, 2, 3]
        assert list(left) == [1]
        assert list(right) == [2, 3]

    def test_identity(self):
        log = Log.of("x")
        assert Log().combine(log) == log
        assert log.combine(Log()) == log

    def test_tell(self):
        log = Log.of("a")
        assert list(log.tell("b")) == ["a", "b"]
        assert list(log) == ["a"]


class TestWriterResult:
    """Result plus log"""

    def test_writer_ok(self):
        wr = writer_ok(3, "made 3")
        assert wr.result == Ok(3)
        assert list(wr.log) == ["made 3"]

    def test_writer_error(self):
        wr = writer_error("nope", "tried")
        assert wr.result == Error("nope")
        assert list(wr.log) == ["tried"]

    def test_match(self):
        match writer_ok(1, "x"):
            case WriterResult(Ok(value), log):
                assert value == 1
                assert list(log) == ["x"]

    def test_repr(self):
        assert repr(WriterResult(Ok(1), Log.of("a"))).startswith("WriterResult(")
