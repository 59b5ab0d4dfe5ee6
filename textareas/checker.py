"""Capture printed output and check it for expected strings."""

from __future__ import annotations

import io
import random
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager, redirect_stdout
from typing import TextIO


class OutputChecker:
    """Holds the last captured output and searches it."""

    def __init__(self) -> None:
        self.output = ""

    @contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        """Collect everything printed inside the block, then echo it."""
        buffer = io.StringIO()
        try:
            with redirect_stdout(buffer):
                yield buffer
        finally:
            self.output = buffer.getvalue()
            sys.stdout.write(self.output)

    def find(self, needles: Iterable[str]) -> list[str]:
        """Return the needles missing from the output, reporting each."""
        missing = [needle for needle in needles if needle not in self.output]
        for needle in missing:
            print(f"{needle} not found")
        return missing

    def find_in_order(self, needles: Iterable[str]) -> list[str]:
        """Return the needles not found after the previous match.

        After a miss the search starts again from the beginning.
        """
        missing = []
        found = -1
        for needle in needles:
            found = self.output.find(needle, found + 1)
            if found == -1:
                print(f"{needle} not found in order")
                missing.append(needle)
        return missing

    def confirm_absent(self, needles: Iterable[str]) -> list[str]:
        """Return the needles that appear in the output but should not."""
        present = [needle for needle in needles if needle in self.output]
        for needle in present:
            print(f"{needle} found but should not be")
        return present

    def wait_for_enter(self, stream: TextIO | None = None) -> None:
        """Prompt, then consume input up to and including a newline."""
        print("Press enter to continue...")
        (sys.stdin if stream is None else stream).readline()


def random_sample(count: int, limit: int) -> list[int]:
    """Return ``count`` distinct random integers from ``0`` to ``limit - 1``."""
    return random.sample(range(limit), count)


def random_int(start: int, stop: int) -> int:
    """Return a random integer from ``start`` to ``stop - 1``."""
    return random.randrange(start, stop)