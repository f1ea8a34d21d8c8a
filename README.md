# pokedexcli

An interactive Pokedex for the terminal. It pages through location areas,
lists the Pokemon found in them, and lets you try to catch and inspect
Pokemon, using data fetched from the PokeAPI. It needs only the Python
standard library.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

The same prompt can be started with `python -m pokedexcli.repl`.

You are greeted with `Pokedex > `. Input is lower-cased and split on
whitespace, so commands and names are case-insensitive. The prompt runs until
you type `exit` or standard input ends. The commands are:

- `help`: print a welcome message and every command with its description
- `map`: print the next page of location areas; after the last page it starts
  again from the first
- `mapb`: print the previous page of location areas; on the first page it
  answers `you're on the first page`
- `explore <area>`: print the Pokemon that can be met in a location area
- `catch <pokemon>`: throw a Pokeball. A number is drawn at random below the
  Pokemon's base experience; if it is 40 or less the Pokemon is caught, so
  Pokemon with more base experience are harder to catch
- `inspect <pokemon>`: print the name, height, weight, stats and types of a
  Pokemon you have caught
- `pokedex`: list every Pokemon you have caught
- `exit`: print a goodbye and close the Pokedex

A command that is not in this list prints `Unknown command`. A command given
the wrong number of names, or a request to the API that fails, prints a short
message and the prompt carries on.

An example session:

```
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
...
```

Requests time out after five seconds. Answers for single location areas and
Pokemon are kept in memory for five minutes, so asking again within that time
does not go back to the network; pages of the location listing are fetched
each time.

## Using it as a library

- `pokedexcli.client.PokeApiClient(timeout=5.0, cache_interval=300.0, *, base_url=..., fetch=None)`
  with `get_location(name)`, `list_locations(page_url=None)`,
  `get_pokemon(name)` and `close()`; it can be used as a context manager.
  `fetch`, if given, is called as `fetch(url, timeout)` and must return the
  response body as bytes. Failed requests and undecodable answers raise
  `pokedexcli.client.PokeApiError`.
- `pokedexcli.cache.Cache(interval)`, a thread-safe cache of byte strings with
  `add(key, value)`, `get(key)` (returns `None` when the key is absent) and
  `close()`. A background thread drops entries older than `interval` seconds.
- `pokedexcli.models` holds the frozen dataclasses `Pokemon`, `Location`,
  `LocationPage`, `PokemonEncounter`, `PokemonStat`, `PokemonTypeSlot` and
  `NamedResource`, each built from decoded JSON with `from_dict`.
- `pokedexcli.commands` holds the commands (`command_help`, `command_map`,
  `command_mapb`, `command_explore`, `command_catch`, `command_inspect`,
  `command_pokedex`, `command_exit`), `get_commands()`, the session state
  `Config` and `CommandError`.
- `pokedexcli.repl.start_repl(cfg, stdin=None, stdout=None)` runs the prompt on
  the given streams, and `pokedexcli.repl.clean_input(text)` lower-cases a line
  and splits it into words.

## What it does not do

Caught Pokemon are kept only for the session: nothing is saved to disk, and
the Pokedex is empty each time the prompt starts.

## Running the tests

```
pip install ".[test]"
pytest
```