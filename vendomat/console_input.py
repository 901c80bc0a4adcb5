"""Item selection typed in at a text console."""

import sys
from functools import lru_cache
from typing import Optional, TextIO

from vendomat.interfaces import ItemSelector

PROMPT = "Enter item: "


class ConsoleInput(ItemSelector):
    """Prompts for an item name and reads one line in reply.

    With no stream or output given, the process's standard input and
    output are used, looked up at the time of each prompt.
    """

    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._output = output
        self.last_selection = ""

    def get_selection(self) -> str:
        output = sys.stdout if self._output is None else self._output
        stream = sys.stdin if self._stream is None else self._stream
        output.write(PROMPT)
        output.flush()
        line = stream.readline()
        self.last_selection = line[:-1] if line.endswith("\n") else line
        return self.last_selection


@lru_cache(maxsize=None)
def get_item_selector() -> ConsoleInput:
    """Return the machine's single console selector on standard input."""
    return ConsoleInput()