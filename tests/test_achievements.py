import pytest

from persona_forge.models import PlayerStats
from persona_forge.scoring.achievements import (
    CATALOG,
    achievement_progress,
    check_achievements,
    initial_achievements,
)


def test_catalog_has_all_achievements():
    assert len(CATALOG) == 13
    assert {a.rarity for a in CATALOG.values()} == {"common", "rare", "epic", "legendary"}


def test_first_round_unlocks():
    stats = PlayerStats(rounds_completed=1, hash_copied=True, logged_in=True, completion_time=95)
    result = check_achievements(stats, now=1000.0)
    assert set(result.new_unlocks) == {"first_hash", "first_login", "first_round", "speed_demon", "perfectionist"}
    unlocked = {a.id: a for a in result.achievements if a.unlocked}
    assert unlocked["first_round"].unlocked_at == 1000.0


def test_hint_use_blocks_perfectionist():
    result = check_achievements(PlayerStats(rounds_completed=1, used_hint=True), now=1.0)
    assert "perfectionist" not in result.new_unlocks


def test_slow_rounds_do_not_unlock_speed_demon():
    result = check_achievements(PlayerStats(rounds_completed=1, completion_time=120), now=1.0)
    assert "speed_demon" not in result.new_unlocks


def test_streak_and_round_milestones():
    stats = PlayerStats(rounds_completed=25, current_streak=5, no_hint_streak=3)
    result = check_achievements(stats, now=1.0)
    for aid in ("rounds_10", "rounds_25", "streak_3", "streak_5", "no_hint_streak_3"):
        assert aid in result.new_unlocks
    assert "rounds_50" not in result.new_unlocks
    assert "streak_10" not in result.new_unlocks


def test_already_unlocked_keep_their_timestamp():
    first = check_achievements(PlayerStats(rounds_completed=1), now=10.0)
    second = check_achievements(PlayerStats(rounds_completed=2), first.achievements, now=20.0)
    assert "first_round" not in second.new_unlocks
    first_round = next(a for a in second.achievements if a.id == "first_round")
    assert first_round.unlocked_at == 10.0


def test_input_list_is_not_mutated():
    current = initial_achievements()
    check_achievements(PlayerStats(rounds_completed=1), current, now=1.0)
    assert not any(a.unlocked for a in current)


def test_progress_values():
    stats = PlayerStats(rounds_completed=10, current_streak=2)
    assert achievement_progress("rounds_25", stats).progress == 0.4
    assert achievement_progress("rounds_25", stats).current == 10
    assert achievement_progress("first_round", stats).current == 1
    assert achievement_progress("streak_10", stats).progress == 0.2
    assert achievement_progress("speed_demon", stats).progress == 0.0


def test_unknown_achievement_raises():
    with pytest.raises(ValueError):
        achievement_progress("nope", PlayerStats())
