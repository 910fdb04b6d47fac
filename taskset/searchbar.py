"""Prefix search over stored queries, backed by a trie and a plain text file."""

from __future__ import annotations

import os
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

DEFAULT_DATA_FILE = "data.txt"


@dataclass
class TrieNode:
    """One node of the query trie."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_end: bool = False

    def words(self, prefix: str) -> Iterator[str]:
        """Yield every stored word below this node, each prefixed with ``prefix``."""
        if self.is_end:
            yield prefix
        for char, child in self.children.items():
            yield from child.words(prefix + char)


def normalize(text: str) -> str:
    """Lower-case ``text``, trim it and collapse runs of spaces into one."""
    if not text:
        return ""
    trimmed = text.lower().strip()
    return " ".join(token for token in trimmed.split(" ") if token)


class SearchBar:
    """Stores queries and finds those starting with a given prefix.

    Queries are loaded from ``file_path`` on creation and written back by
    :meth:`save` / :meth:`close`. An empty path keeps everything in memory.
    """

    def __init__(self, file_path: str | os.PathLike[str] = DEFAULT_DATA_FILE) -> None:
        self.file_path: Path | None = Path(file_path) if str(file_path) else None
        self.root = TrieNode()
        self._closed = False
        if self.file_path is None:
            return
        try:
            with self.file_path.open(encoding="utf-8") as source:
                for line in source:
                    self.add_query(line.rstrip("\n"))
        except FileNotFoundError:
            try:
                self.file_path.touch()
            except OSError:
                print(f"Cannot create file: {self.file_path}", file=sys.stderr)

    def search(self, query: str) -> list[str]:
        """Return every stored query that starts with the normalized ``query``."""
        prefix = normalize(query)
        node = self.root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return []
            node = child
        return list(node.words(prefix))

    def add_query(self, new_query: str) -> None:
        """Normalize ``new_query`` and store it."""
        node = self.root
        for char in normalize(new_query):
            node = node.children.setdefault(char, TrieNode())
        node.is_end = True

    def save(self) -> None:
        """Write all queries to the data file through a temporary file.

        Raises OSError when the file cannot be written.
        """
        if self.file_path is None:
            return
        temp_file = Path(tempfile.gettempdir()) / (self.file_path.name + ".tmp")
        with temp_file.open("w", encoding="utf-8") as output:
            for query in self.search(""):
                output.write(query + "\n")
        try:
            os.replace(temp_file, self.file_path)
        except OSError:
            temp_file.unlink(missing_ok=True)
            raise
        print(f'Queries saved as: "{self.file_path}"')

    def close(self) -> None:
        """Save the queries once; failures are reported on stderr."""
        if self._closed:
            return
        self._closed = True
        try:
            self.save()
        except OSError as error:
            print(f"Error while saving queries: {error}", file=sys.stderr)

    def __enter__(self) -> SearchBar:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()