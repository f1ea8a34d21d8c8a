import io
import json

import pytest

from pokedexcli.client import BASE_URL, PokeApiClient, PokeApiError
from pokedexcli.commands import (
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)

PIKACHU = {
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
}

AREA = {
    "name": "canalave-city-area",
    "pokemon_encounters": [
        {"pokemon": {"name": "tentacool", "url": "u"}},
        {"pokemon": {"name": "staryu", "url": "u"}},
    ],
}

FIRST = BASE_URL + "/location-area"
SECOND = "https://example.com/page2"

RESPONSES = {
    BASE_URL + "/pokemon/pikachu": PIKACHU,
    BASE_URL + "/location-area/canalave-city-area": AREA,
    FIRST: {
        "count": 4,
        "next": SECOND,
        "previous": None,
        "results": [{"name": "one-area"}, {"name": "two-area"}],
    },
    SECOND: {
        "count": 4,
        "next": None,
        "previous": FIRST,
        "results": [{"name": "three-area"}, {"name": "four-area"}],
    },
}


def fetch(url, timeout):
    if url not in RESPONSES:
        raise OSError(f"no route to {url}")
    return json.dumps(RESPONSES[url]).encode()


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.value


@pytest.fixture
def cfg():
    with PokeApiClient(fetch=fetch) as client:
        yield Config(client=client, out=io.StringIO(), rng=FixedRng(0))


def lines(cfg):
    return cfg.out.getvalue().splitlines()


def test_help_lists_every_command(cfg):
    command_help(cfg)
    output = lines(cfg)
    assert output[1] == "Welcome to the Pokedex!"
    assert output[2] == "Usage:"
    for command in get_commands().values():
        assert f"{command.name}: {command.description}" in output


def test_command_table_names_match_keys():
    commands = get_commands()
    assert set(commands) == {
        "help", "explore", "map", "mapb", "catch", "inspect", "pokedex", "exit",
    }
    assert all(name == command.name for name, command in commands.items())


def test_explore_prints_encounters(cfg):
    command_explore(cfg, "canalave-city-area")
    assert lines(cfg) == [
        "Exploring canalave-city-area...",
        "Found Pokemon: ",
        " - tentacool",
        " - staryu",
    ]


def test_explore_requires_one_argument(cfg):
    with pytest.raises(CommandError, match="you must provide a location name"):
        command_explore(cfg)
    with pytest.raises(CommandError):
        command_explore(cfg, "a", "b")


def test_explore_unknown_location_raises_api_error(cfg):
    with pytest.raises(PokeApiError):
        command_explore(cfg, "nowhere")


def test_map_pages_forward_and_back(cfg):
    command_map(cfg)
    assert lines(cfg) == ["one-area", "two-area"]
    assert cfg.next_locations_url == SECOND
    assert cfg.prev_locations_url is None

    command_map(cfg)
    assert lines(cfg)[2:] == ["three-area", "four-area"]
    assert cfg.next_locations_url is None
    assert cfg.prev_locations_url == FIRST

    command_mapb(cfg)
    assert lines(cfg)[4:] == ["one-area", "two-area"]
    assert cfg.next_locations_url == SECOND


def test_mapb_on_first_page_fails(cfg):
    with pytest.raises(CommandError, match="you're on the first page"):
        command_mapb(cfg)
    assert lines(cfg) == []


def test_catch_success_adds_to_pokedex(cfg):
    command_catch(cfg, "pikachu")
    assert lines(cfg) == [
        "Throwing a Pokeball at pikachu...",
        "pikachu was caught!",
        "You may now inspect it with the inspect command.",
    ]
    assert cfg.caught_pokemon["pikachu"].name == "pikachu"
    assert cfg.rng.bounds == [PIKACHU["base_experience"]]


def test_catch_threshold_is_inclusive(cfg):
    cfg.rng = FixedRng(40)
    command_catch(cfg, "pikachu")
    assert "pikachu" in cfg.caught_pokemon


def test_catch_escape_leaves_pokedex_empty(cfg):
    cfg.rng = FixedRng(41)
    command_catch(cfg, "pikachu")
    assert lines(cfg) == ["Throwing a Pokeball at pikachu...", "pikachu escaped!"]
    assert cfg.caught_pokemon == {}


def test_catch_requires_one_argument(cfg):
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_catch(cfg)


def test_inspect_prints_details(cfg):
    command_catch(cfg, "pikachu")
    cfg.out = io.StringIO()
    command_inspect(cfg, "pikachu")
    assert lines(cfg) == [
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  -hp: 35",
        "  -attack: 55",
        "Types:",
        "  - electric",
    ]


def test_inspect_uncaught_fails(cfg):
    with pytest.raises(CommandError, match="you have not caught that pokemon"):
        command_inspect(cfg, "pikachu")
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_inspect(cfg)


def test_pokedex_lists_caught(cfg):
    command_pokedex(cfg)
    assert lines(cfg) == ["Your Pokedex:"]
    command_catch(cfg, "pikachu")
    cfg.out = io.StringIO()
    command_pokedex(cfg)
    assert lines(cfg) == ["Your Pokedex:", " - pikachu"]


def test_exit_says_goodbye_and_exits(cfg):
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0
    assert lines(cfg) == ["Closing the Pokedex... Goodbye!"]