# pokedexcli

An interactive Pokedex for the terminal. Browse location areas of the Pokemon
world, see which Pokemon live there, try to catch them and inspect the ones
you caught. Data comes from the public PokeAPI over plain HTTP requests made
with the standard library; location responses are kept in a short-lived
in-memory cache.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Usage

Start the prompt:

```
pokedexcli
```

Then type commands at the `Pokedex > ` prompt:

| Command                   | What it does                                          |
|---------------------------|-------------------------------------------------------|
| `help`                    | Shows the help message                                |
| `map`                     | Lists 20 location areas; run again for the next page  |
| `mapb`                    | Goes back to the previous page of location areas      |
| `explore <location-area>` | Lists the Pokemon found in an area                    |
| `catch <pokemon-name>`    | Throws a Pokeball at a Pokemon                        |
| `inspect <pokemon-name>`  | Shows details of a Pokemon you caught                 |
| `pokedex`                 | Lists every Pokemon you caught                        |
| `exit`                    | Closes the Pokedex                                    |

Input is case-insensitive. Words after the command are joined with dashes, so
`explore Canalave City Area` explores `canalave-city-area`.

`mapb` before any page has a previous one prints `you're on the first page`.
A catch attempt takes three seconds and succeeds about seven times in ten;
a Pokemon already in the Pokedex is not thrown at again. An unknown command
prints `Unknown command`, and a failed request prints `Error: ` followed by
the reason. The prompt ends on `exit`, on Ctrl+C, or at the end of input.

`pokedexcli --help` shows the command's usage; it takes no other options.

## Using it as a library

```python
from pokedexcli.api import Client
from pokedexcli.cache import Cache

client = Client(timeout=5.0)
with Cache(interval=5.0) as cache:
    page = client.list_locations(None, cache)
    print([area.name for area in page.results])
    area = client.list_pokemons("canalave-city-area", cache)
    print(area.pokemon_names())
    pikachu = client.pokemon_details("pikachu")
    print(pikachu.base_experience, pikachu.types)
```

- `pokedexcli.api.Client` fetches pages of location areas
  (`list_locations`), a single area (`list_pokemons`) and a Pokemon's details
  (`pokemon_details`). A response with a status above 299, a network failure
  or a body that cannot be decoded raises `pokedexcli.api.ApiError`. Its
  `fetch` argument replaces the network call with any function taking a URL
  and a timeout and returning `(status, body)`.
- `pokedexcli.cache.Cache` maps keys to bytes. A background thread wakes every
  `interval` seconds and drops the entries stored before it woke, so an entry
  lives at most one interval. `close()` (or leaving the `with` block) stops
  that thread.
- `pokedexcli.types` holds the records built from responses: `LocationArea`,
  `LocationAreaDetail`, `Pokemon`, `MoveLearned`, `BaseStat` and
  `NamedResource`, each with a `from_dict` constructor.
- `pokedexcli.commands` holds the prompt's commands, `get_commands()` and the
  `Session` they share; `pokedexcli.repl` holds `clean_input`, `start_repl`
  and `main`.

## What it does not do

- The Pokedex lives only in memory: caught Pokemon are lost when the prompt
  ends, and nothing is saved to disk.
- Pokemon details are fetched anew on every `catch`; only location listings
  and areas go through the cache.

## Running the tests

```
pip install ".[test]"
pytest
```