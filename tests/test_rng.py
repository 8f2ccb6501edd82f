import pytest

from persona_forge.utils.rng import SeededRandom


def test_next_follows_the_lcg_recurrence():
    rng = SeededRandom(42)
    assert rng.next() == 206659 / 233280
    assert rng.next() == 190736 / 233280
    assert rng.next() == 223713 / 233280


def test_same_seed_same_sequence():
    a, b = SeededRandom(7), SeededRandom(7)
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]


def test_different_seeds_diverge():
    a, b = SeededRandom(1), SeededRandom(2)
    assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]


def test_next_stays_in_unit_interval():
    rng = SeededRandom(123)
    for _ in range(1000):
        assert 0 <= rng.next() < 1


def test_int_is_inclusive_on_both_ends():
    rng = SeededRandom(99)
    seen = {rng.int(1, 3) for _ in range(300)}
    assert seen == {1, 2, 3}


def test_pick_from_empty_raises():
    with pytest.raises(ValueError):
        SeededRandom(1).pick([])


def test_picks_returns_distinct_items():
    items = list(range(10))
    chosen = SeededRandom(5).picks(items, 4)
    assert len(chosen) == 4
    assert len(set(chosen)) == 4
    assert set(chosen) <= set(items)


def test_picks_more_than_available_raises():
    with pytest.raises(ValueError):
        SeededRandom(5).picks([1, 2], 3)


def test_shuffle_is_a_permutation_and_leaves_input_alone():
    items = ["a", "b", "c", "d", "e"]
    shuffled = SeededRandom(11).shuffle(items)
    assert sorted(shuffled) == items
    assert items == ["a", "b", "c", "d", "e"]


def test_boolean_extremes():
    rng = SeededRandom(3)
    assert not any(rng.boolean(0) for _ in range(100))
    assert all(rng.boolean(1) for _ in range(100))
