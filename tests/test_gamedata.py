import pytest

from peril.gamedata import (
    Player,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
    overlapping_location,
    units_to_power_level,
)


def test_all_ranks():
    assert all_ranks() == {"infantry", "cavalry", "artillery"}


def test_all_locations():
    assert all_locations() == {
        "americas",
        "europe",
        "africa",
        "asia",
        "australia",
        "antarctica",
    }


def test_unit_rank_from_string():
    unit = Unit(1, "cavalry", "asia")
    assert unit.rank is UnitRank.CAVALRY
    assert str(unit.rank) == "cavalry"
    assert f"{unit.rank}" == "cavalry"


def test_unit_rejects_unknown_rank():
    with pytest.raises(ValueError):
        Unit(1, "dragon", "asia")


@pytest.mark.parametrize(
    "rank, power",
    [(UnitRank.ARTILLERY, 10), (UnitRank.CAVALRY, 5), (UnitRank.INFANTRY, 1)],
)
def test_single_unit_power(rank, power):
    assert units_to_power_level([Unit(1, rank, "asia")]) == power


def test_power_is_additive():
    a = [Unit(1, "artillery", "asia"), Unit(2, "infantry", "asia")]
    b = [Unit(3, "cavalry", "europe")]
    assert units_to_power_level(a + b) == units_to_power_level(a) + units_to_power_level(b)


def test_empty_power():
    assert units_to_power_level([]) == 0


def test_overlapping_location_found():
    p1 = Player("a", {1: Unit(1, "infantry", "asia"), 2: Unit(2, "infantry", "europe")})
    p2 = Player("b", {1: Unit(1, "cavalry", "europe")})
    assert overlapping_location(p1, p2) == "europe"
    assert overlapping_location(p2, p1) == "europe"


def test_overlapping_location_none():
    p1 = Player("a", {1: Unit(1, "infantry", "asia")})
    p2 = Player("b", {1: Unit(1, "cavalry", "africa")})
    assert overlapping_location(p1, p2) is None
    assert overlapping_location(Player("c"), p2) is None