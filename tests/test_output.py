import os

import pytest

from pipechain.output import put_char, put_endl, put_nbr, put_str


class _Pipe:
    """Pipe whose write end is handed to the code under test."""

    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self.close_write()
        with os.fdopen(self.read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def close(self):
        self.close_write()
        if self._read_open:
            os.close(self.read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_put_char(pipe):
    put_char("A", pipe.write_fd)
    assert pipe.read() == b"A"


def test_put_char_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        put_char("AB", pipe.write_fd)


def test_put_str(pipe):
    put_str("Bonjour", pipe.write_fd)
    assert pipe.read() == b"Bonjour"


def test_put_str_empty(pipe):
    put_str("", pipe.write_fd)
    assert pipe.read() == b""


def test_put_endl_appends_newline(pipe):
    put_endl("Bonjour", pipe.write_fd)
    assert pipe.read() == b"Bonjour\n"


def test_put_nbr_int_min(pipe):
    put_nbr(-2147483648, pipe.write_fd)
    assert pipe.read() == b"-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647])
def test_put_nbr_round_trip(pipe, n):
    put_nbr(n, pipe.write_fd)
    assert int(pipe.read()) == n


def test_put_nbr_negative_has_single_sign(pipe):
    put_nbr(-123, pipe.write_fd)
    out = pipe.read()
    assert out.startswith(b"-")
    assert out.count(b"-") == 1
    assert out[1:].isdigit()


def test_sequential_writes_concatenate(pipe):
    put_str("x=", pipe.write_fd)
    put_nbr(10, pipe.write_fd)
    put_char("!", pipe.write_fd)
    assert pipe.read() == b"x=10!"