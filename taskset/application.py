"""Command interpreter for the query search bar."""

from __future__ import annotations

import argparse
import os
import sys
from typing import TextIO

from taskset.searchbar import SearchBar

DEFAULT_FILE = "date.txt"

_ADD = "add: "
_ASK = "ask: "

_HELP = (
    "Nieznana komenda. Dostępne komendy:\n"
    "  add: <tekst> - dodaje wpis\n"
    "  ask: <pytanie> - zadaje pytanie\n"
    "  (pusta linia) - zakończenie programu\n"
)


class Application:
    """Runs ``add:`` and ``ask:`` commands against a :class:`SearchBar`."""

    def __init__(
        self,
        file_path: str | os.PathLike[str] = DEFAULT_FILE,
        out: TextIO | None = None,
    ) -> None:
        self.search_bar = SearchBar(file_path)
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def process_command(self, line: str) -> None:
        """Execute one command line, writing any output to ``out``."""
        if line.startswith(_ADD):
            self.search_bar.add_query(line[len(_ADD):])
        elif line.startswith(_ASK):
            for result in self.search_bar.search(line[len(_ASK):]):
                self.out.write(f"result: {result}\n")
        else:
            self.out.write(_HELP)
        self.out.flush()


def main(argv: list[str] | None = None) -> int:
    """Read commands from stdin until an empty line or end of input."""
    parser = argparse.ArgumentParser(description="Store and search queries by prefix.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="data file")
    args = parser.parse_args(argv)

    application = Application(args.file)
    with application.search_bar:
        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            if not line:
                break
            application.process_command(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())