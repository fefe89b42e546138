"""The commands the Pokedex prompt understands."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, TextIO

from .api import BASE_URL, Client
from .cache import Cache
from .types import LocationArea, Pokemon

_CATCH_THRESHOLD = 30


@dataclass
class Session:
    """State shared by the commands of one interactive session."""

    client: Client
    cache: Cache
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    next_url: str | None = None
    previous_url: str | None = None
    out: TextIO = field(default_factory=lambda: sys.stdout)
    rng: random.Random = field(default_factory=random.Random)
    catch_delay: float = 3.0

    def say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.out)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Session, str], None]


def help_command(session: Session, arg: str) -> None:
    """Print a usage message listing every command."""
    session.say("", "Welcome to the Pokedex!", "Usage:", "")
    for command in get_commands().values():
        session.say(f"{command.name}: {command.description}")
    session.say("")


def exit_command(session: Session, arg: str) -> None:
    """Say goodbye and leave the program."""
    session.out.write("Closing the Pokedex... Goodbye!")
    session.out.flush()
    raise SystemExit(0)


def _show_page(session: Session, url: str) -> None:
    areas: LocationArea = session.client.list_locations(url, session.cache)
    session.next_url = areas.next
    if areas.previous is not None:
        session.previous_url = areas.previous
    for area in areas.results:
        session.say(area.name)


def map_command(session: Session, arg: str) -> None:
    """Print the next page of location areas."""
    if session.next_url is None:
        session.next_url = BASE_URL + "/location-area"
    _show_page(session, session.next_url)


def mapb_command(session: Session, arg: str) -> None:
    """Print the previous page of location areas."""
    if session.previous_url is None:
        session.say("you're on the first page")
        return
    _show_page(session, session.previous_url)


def explore_command(session: Session, arg: str) -> None:
    """Print the pokemon that can be met in a location area."""
    detail = session.client.list_pokemons(arg, session.cache)
    for name in detail.pokemon_names():
        session.say(name)


def catch_command(session: Session, arg: str) -> None:
    """Throw a Pokeball at a pokemon; a caught one goes into the pokedex."""
    if arg in session.pokedex:
        session.say(f"You already caught {arg}")
        return
    pokemon = session.client.pokemon_details(arg)
    session.say(f"Throwing a Pokeball at {pokemon.name}...")
    roll = session.rng.randint(0, 100)
    if session.catch_delay > 0:
        time.sleep(session.catch_delay)
    if roll > _CATCH_THRESHOLD:
        session.say(f"{pokemon.name} was caught!")
        session.pokedex[arg] = pokemon
    else:
        session.say(f"{pokemon.name} escaped!")


def inspect_command(session: Session, arg: str) -> None:
    """Print the details of a caught pokemon."""
    pokemon = session.pokedex.get(arg)
    if pokemon is None:
        session.say("You haven't caught that pokemon!")
        return
    session.say(
        f"Name: {pokemon.name}",
        f"Base Experience: {pokemon.base_experience}",
        f"Height: {pokemon.height}",
        f"Weight: {pokemon.weight}",
        "Abilities:",
    )
    session.say(*(f"\t- {ability}" for ability in pokemon.abilities))
    session.say("Forms:")
    session.say(*(f"\t- {form}" for form in pokemon.forms))
    session.say("Moves:")
    session.say(
        *(
            f"\t- {m.move.name} -- learns at level {m.level_learned_at}"
            for m in pokemon.moves
        )
    )
    session.say("Stats:")
    session.say(*(f"\t- {s.stat.name} {s.base_stat}" for s in pokemon.stats))
    session.say("Types:")
    session.say(*(f"\t- {t}" for t in pokemon.types))


def pokedex_command(session: Session, arg: str) -> None:
    """Print the names of every caught pokemon."""
    if not session.pokedex:
        session.say("Your pokedex is empty... Go catch some pokemons!")
        return
    session.say("Your Pokedex:")
    session.say(*(f"\t- {p.name}" for p in session.pokedex.values()))


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the word that starts it."""
    return {
        "exit": Command("exit", "Exit the Pokedex", exit_command),
        "help": Command("help", "Displays a help message", help_command),
        "map": Command(
            "map",
            "Displays 20 location areas in the Pokemon world, use it again to get the next page",
            map_command,
        ),
        "mapb": Command("mapb", "Goes to the previous page", mapb_command),
        "explore": Command(
            "explore <location-area>", "Explores pokemons in a given area", explore_command
        ),
        "catch": Command(
            "catch <pokemon-name>",
            "Once you explore an area, try to catch a pokemon...",
            catch_command,
        ),
        "inspect": Command(
            "inspect <pokemon-name>", "Inspect a pokemon you caught", inspect_command
        ),
        "pokedex": Command("pokedex", "Displays all pokemons you've caught", pokedex_command),
    }