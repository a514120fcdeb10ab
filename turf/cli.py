"""List running processes with their names."""

from __future__ import annotations

import argparse
import sys

import psutil

from turf.process import Process

MAX_PIDS = 1024


def enum_proc() -> list[int]:
    """Return the identifiers of running processes, at most MAX_PIDS of them."""
    try:
        pids = psutil.pids()
    except psutil.Error as exc:
        raise OSError(str(exc) or "cannot enumerate processes") from exc
    return list(pids[:MAX_PIDS])


def main(argv: list[str] | None = None) -> int:
    """Print "pid: name" for every process that can be opened."""
    parser = argparse.ArgumentParser(
        prog="turf", description="List running processes and their names."
    )
    parser.parse_args(argv)
    for pid in enum_proc():
        try:
            process = Process.open(pid)
        except (OSError, ValueError) as exc:
            print(f"failed to open {pid}: {exc}", file=sys.stderr)
            continue
        with process:
            print(f"{pid}: {process.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())