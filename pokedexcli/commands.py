"""The commands the Pokédex prompt understands."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from .client import PokeApiClient
from .models import Pokemon

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command could not do what was asked; the message is for the user."""


@dataclass
class Config:
    """State shared by the commands of one session."""

    client: PokeApiClient
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    out: TextIO | None = None
    rng: Any = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def _say(cfg: Config, *parts: object) -> None:
    print(*parts, file=cfg.out if cfg.out is not None else sys.stdout)


def _single_arg(args: tuple[str, ...], message: str) -> str:
    if len(args) != 1:
        raise CommandError(message)
    return args[0]


def command_help(cfg: Config, *args: str) -> None:
    """Print a welcome message and every command with its description."""
    _say(cfg)
    _say(cfg, "Welcome to the Pokedex!")
    _say(cfg, "Usage:")
    _say(cfg)
    for command in get_commands().values():
        _say(cfg, f"{command.name}: {command.description}")
    _say(cfg)


def command_explore(cfg: Config, *args: str) -> None:
    """Print the Pokémon that can be met in a location area."""
    name = _single_arg(args, "you must provide a location name")
    location = cfg.client.get_location(name)
    _say(cfg, f"Exploring {location.name}...")
    _say(cfg, "Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        _say(cfg, f" - {encounter.pokemon.name}")


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        _say(cfg, location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokéball; harder to catch the more base experience a Pokémon has."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(name)
    roll = cfg.rng.randrange(pokemon.base_experience)
    _say(cfg, f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        _say(cfg, f"{pokemon.name} escaped!")
        return
    _say(cfg, f"{pokemon.name} was caught!")
    _say(cfg, "You may now inspect it with the inspect command.")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught Pokémon."""
    name = _single_arg(args, "you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    _say(cfg, "Name:", pokemon.name)
    _say(cfg, "Height:", pokemon.height)
    _say(cfg, "Weight:", pokemon.weight)
    _say(cfg, "Stats:")
    for stat in pokemon.stats:
        _say(cfg, f"  -{stat.stat.name}: {stat.base_stat}")
    _say(cfg, "Types:")
    for type_slot in pokemon.types:
        _say(cfg, "  -", type_slot.type.name)


def command_pokedex(cfg: Config, *args: str) -> None:
    """Print the names of every caught Pokémon."""
    _say(cfg, "Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        _say(cfg, f" - {pokemon.name}")


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and end the program."""
    _say(cfg, "Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return every command keyed by its name."""
    commands = (
        Command("help", "Displays a help message", command_help),
        Command("explore", "List of all the Pokémon located in Area", command_explore),
        Command("map", "Get the next page of locations", command_map),
        Command("mapb", "Get the previous page of locations", command_mapb),
        Command("catch", "Try to catch a Pokeman", command_catch),
        Command("inspect", "View caught Pokemon", command_inspect),
        Command("pokedex", "List All caught pokemon", command_pokedex),
        Command("exit", "Exit the Pokedex", command_exit),
    )
    return {command.name: command for command in commands}