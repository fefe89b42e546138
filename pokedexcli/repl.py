"""The interactive Pokedex prompt and the program's entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .api import ApiError, Client
from .cache import Cache
from .commands import Session, get_commands

PROMPT = "Pokedex > "
_INTERRUPT = "\x03"


def clean_input(text: str) -> tuple[str, str]:
    """Split a line into its lower-cased command word and its dash-joined argument.

    ``" Explore Pastoria City "`` becomes ``("explore", "pastoria-city")``.
    """
    words = text.lower().split()
    if not words:
        raise ValueError("input holds no command")
    return words[0], "-".join(words[1:])


def start_repl(
    session: Session,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Read commands line by line and run them until input ends or Ctrl+C is pressed."""
    stdin = sys.stdin if stdin is None else stdin
    if stdout is not None:
        session.out = stdout
    out = session.out
    commands = get_commands()

    while True:
        out.write(PROMPT)
        out.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            line = _INTERRUPT
        if not line:
            out.write("\n")
            out.flush()
            return
        if _INTERRUPT in line:
            print("Exiting...", file=out)
            return
        if not line.strip():
            continue

        name, arg = clean_input(line)
        command = commands.get(name)
        if command is None:
            print("Unknown command", file=out)
            continue
        try:
            command.callback(session, arg)
        except ApiError as err:
            print(f"Error: {err}", file=out)
        except KeyboardInterrupt:
            print("Exiting...", file=out)
            return


def main(argv: list[str] | None = None) -> int:
    """Start an interactive Pokedex session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="Explore the Pokemon world from the command line."
    )
    parser.parse_args(argv)
    client = Client(timeout=5.0)
    with Cache(5.0) as cache:
        session = Session(client=client, cache=cache, out=sys.stdout)
        start_repl(session, sys.stdin, sys.stdout)
    return 0