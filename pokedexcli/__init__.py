"""An interactive command-line Pokedex backed by the PokeAPI, with a caching client."""

__version__ = "0.1.0"