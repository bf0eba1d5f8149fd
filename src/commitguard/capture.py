"""Scoped capture of standard output.

Checks often shell out to linters, so the capture works on file descriptor 1
rather than only on ``sys.stdout``. Child processes inherit the redirected
descriptor and their output is captured along with Python-level prints.
"""

import io
import os
import sys
import tempfile
from contextlib import contextmanager, redirect_stdout
from typing import Iterator

STDOUT_FILENO = 1


class CapturedOutput:
    """Text written to standard output during a ``capture_stdout`` block.

    The value is available once the block has exited.
    """

    def __init__(self) -> None:
        self._value = ""

    def getvalue(self) -> str:
        return self._value


class _DescriptorWriter(io.TextIOBase):
    """Text stream writing straight to a file descriptor, unbuffered."""

    def __init__(self, fd: int, encoding: str = "utf-8") -> None:
        super().__init__()
        self._fd = fd
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def writable(self) -> bool:
        return True

    def fileno(self) -> int:
        return self._fd

    def write(self, text: str) -> int:
        data = text.encode(self._encoding, "replace")
        while data:
            written = os.write(self._fd, data)
            data = data[written:]
        return len(text)


@contextmanager
def capture_stdout() -> Iterator[CapturedOutput]:
    """Redirect standard output into a temporary file for the block.

    Both ``sys.stdout`` and file descriptor 1 point at the capture while the
    block runs. The original stream and descriptor are restored when the
    block exits, whether it returns or raises.

    Example:
        with capture_stdout() as output:
            print("hidden")
            subprocess.run(["echo", "also hidden"])
        assert output.getvalue() == "hidden\\nalso hidden\\n"
    """
    output = CapturedOutput()
    sys.stdout.flush()

    with tempfile.TemporaryFile() as capture_file:
        saved_fd = os.dup(STDOUT_FILENO)
        try:
            os.dup2(capture_file.fileno(), STDOUT_FILENO)
            with redirect_stdout(_DescriptorWriter(STDOUT_FILENO)):
                yield output
        finally:
            os.dup2(saved_fd, STDOUT_FILENO)
            os.close(saved_fd)
            capture_file.seek(0)
            output._value = capture_file.read().decode("utf-8", "replace")
