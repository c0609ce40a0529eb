from __future__ import annotations

import io

import pytest

from pagebake import OutputCapture


def test_collects_incremental_writes():
    with OutputCapture() as capture:
        assert capture.write("<p>") == 3
        capture.write("hi")
        capture.write("</p>")
        assert capture.getvalue() == "<p>hi</p>"


def test_closed_after_block():
    with OutputCapture() as capture:
        capture.write("x")
    assert capture.closed
    with pytest.raises(ValueError):
        capture.write("y")
    with pytest.raises(ValueError):
        capture.getvalue()


def test_closed_when_block_raises():
    capture = OutputCapture()
    with pytest.raises(RuntimeError):
        with capture:
            capture.write("partial")
            raise RuntimeError("boom")
    assert capture.closed


def test_cannot_reenter_closed_capture():
    capture = OutputCapture()
    capture.close()
    with pytest.raises(ValueError):
        with capture:
            pass


def test_is_a_text_stream():
    with OutputCapture() as capture:
        assert isinstance(capture, io.TextIOBase)
        print("hello", file=capture)
        assert capture.getvalue() == "hello\n"
