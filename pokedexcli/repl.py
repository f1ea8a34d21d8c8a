"""The interactive Pokédex prompt."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .client import PokeApiClient, PokeApiError
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(
    cfg: Config, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Read commands from ``stdin`` and run them until input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    if stdout is None:
        stdout = cfg.out if cfg.out is not None else sys.stdout
    commands = get_commands()
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command", file=stdout)
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, PokeApiError) as err:
            print(err, file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Start the Pokédex prompt on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="Explore locations and catch Pokémon."
    )
    parser.parse_args(argv)
    with PokeApiClient(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())