import pytest

from pokedexcli.types import (
    BaseStat,
    LocationArea,
    LocationAreaDetail,
    MoveLearned,
    NamedResource,
    Pokemon,
)

BASE = "https://pokeapi.co/api/v2"


def _res(name, kind):
    return {"name": name, "url": f"{BASE}/{kind}/{name}/"}


PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "is_default": True,
    "order": 35,
    "abilities": [
        {"is_hidden": False, "slot": 1, "ability": _res("static", "ability")},
        {"is_hidden": True, "slot": 3, "ability": _res("lightning-rod", "ability")},
    ],
    "forms": [_res("pikachu", "pokemon-form")],
    "moves": [
        {
            "move": _res("thunder-shock", "move"),
            "version_group_details": [
                {"level_learned_at": 1, "order": None,
                 "version_group": _res("red-blue", "version-group"),
                 "move_learn_method": _res("level-up", "move-learn-method")},
                {"level_learned_at": 9,
                 "version_group": _res("gold-silver", "version-group"),
                 "move_learn_method": _res("level-up", "move-learn-method")},
            ],
        }
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": _res("hp", "stat")},
        {"base_stat": 90, "effort": 2, "stat": _res("speed", "stat")},
    ],
    "types": [{"slot": 1, "type": _res("electric", "type")}],
    "sprites": {"front_default": None},
}


def test_named_resource_from_dict():
    data = _res("canalave-city-area", "location-area")
    res = NamedResource.from_dict(data)
    assert res == NamedResource(name=data["name"], url=data["url"])


def test_named_resource_missing_fields_default_empty():
    assert NamedResource.from_dict({}) == NamedResource("", "")


def test_location_area_page():
    page = {
        "count": 1089,
        "next": f"{BASE}/location-area?offset=20&limit=20",
        "previous": None,
        "results": [_res("canalave-city-area", "location-area"),
                    _res("eterna-city-area", "location-area")],
    }
    area = LocationArea.from_dict(page)
    assert area.count == page["count"]
    assert area.next == page["next"]
    assert area.previous is None
    assert [r.name for r in area.results] == ["canalave-city-area", "eterna-city-area"]


def test_location_area_rejects_bad_next():
    with pytest.raises(ValueError):
        LocationArea.from_dict({"next": 20})


def test_location_area_detail_pokemon_names():
    data = {
        "id": 1,
        "name": "canalave-city-area",
        "game_index": 1,
        "location": _res("canalave-city", "location"),
        "pokemon_encounters": [
            {"pokemon": _res("tentacool", "pokemon"), "version_details": []},
            {"pokemon": _res("tentacruel", "pokemon"), "version_details": []},
        ],
    }
    detail = LocationAreaDetail.from_dict(data)
    assert detail.pokemon_names() == ["tentacool", "tentacruel"]
    assert detail.location.name == "canalave-city"
    assert detail.name == data["name"]


def test_location_area_detail_empty():
    assert LocationAreaDetail.from_dict({}).pokemon_names() == []


def test_move_learned_uses_first_version_group():
    move = MoveLearned.from_dict(PIKACHU["moves"][0])
    assert move.move.name == "thunder-shock"
    assert move.level_learned_at == PIKACHU["moves"][0]["version_group_details"][0]["level_learned_at"]


def test_base_stat_from_dict():
    stat = BaseStat.from_dict(PIKACHU["stats"][1])
    assert (stat.stat.name, stat.base_stat, stat.effort) == ("speed", 90, 2)


def test_pokemon_from_dict():
    p = Pokemon.from_dict(PIKACHU)
    assert p.name == "pikachu"
    assert (p.base_experience, p.height, p.weight) == (112, 4, 60)
    assert p.is_default is True
    assert p.abilities == ["static", "lightning-rod"]
    assert p.forms == ["pikachu"]
    assert p.types == ["electric"]
    assert [s.stat.name for s in p.stats] == ["hp", "speed"]
    assert len(p.moves) == len(PIKACHU["moves"])


def test_pokemon_missing_fields_take_defaults():
    p = Pokemon.from_dict({"name": "ditto"})
    assert p.name == "ditto"
    assert p.abilities == [] and p.moves == [] and p.base_experience == 0


@pytest.mark.parametrize(
    "data",
    [
        {"height": "tall"},
        {"is_default": 1},
        {"abilities": {"ability": "static"}},
        {"name": 7},
        {"stats": ["hp"]},
    ],
)
def test_pokemon_rejects_wrong_types(data):
    with pytest.raises(ValueError):
        Pokemon.from_dict(data)


def test_pokemon_rejects_non_object():
    with pytest.raises(ValueError):
        Pokemon.from_dict(["pikachu"])