"""Show a text file and optionally replace its contents interactively."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

DEFAULT_PATH = "save_state.txt"


def read_file(file_path: str | Path) -> str:
    """Return the whole file as UTF-8 text, newlines untouched."""
    with open(file_path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line


def file_editor(
    file_path: str | Path = DEFAULT_PATH,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Print the file, ask Y/N, and on Y write one line of new contents.

    Returns the file's contents after the session.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    contents = read_file(file_path)
    print(f"The file contains :\n{contents}\nEdit file? (Y/N)", file=stdout)

    while True:
        user_input = _read_line(stdin).upper()
        answer = user_input.strip()
        if answer == "N":
            break
        if answer == "Y":
            print("Enter new file contents below\n", file=stdout)
            contents = _read_line(stdin)
            print(f"Saving Contents to {file_path} \n{contents}", file=stdout)
            with open(file_path, "w", encoding="utf-8", newline="") as handle:
                handle.write(contents)
            break
        print(f"You entered: {user_input}", file=stdout)

    print("Goodbye!", file=stdout)
    return contents