"""End-to-end generation: determinism, solvability and cosmetic fields."""
import os
import re
from unittest.mock import MagicMock, patch

import pytest

from persona_forge.generators.assembler import generate_profile
from persona_forge.generators.password import bind_password
from persona_forge.generators.sources import FakerNameSource, PoolNameSource
from persona_forge.models import DIFFICULTIES
from persona_forge.utils.clock import DEFAULT_REFERENCE_YEAR
from persona_forge.utils.seeds import SeedFactory

YEAR = 2025


def _generate(seed: int, difficulty: str = "easy"):
    return generate_profile(difficulty, seed, source=PoolNameSource(), reference_year=YEAR)


def test_same_seed_same_profile():
    assert _generate(42) == _generate(42)


def test_seed_42_round_trip_example():
    profile = _generate(42)
    assert profile.persona.pet.name == "Luna"
    assert profile.password == "luna2020"
    assert profile.digest == "b59c67bf196a4758191e42f76670ceba"
    assert "Pet: Luna (dog)" in profile.clues
    assert "Pet adoption year: 2020" in profile.clues
    assert not any(c.startswith("City:") for c in profile.clues)


def test_every_profile_is_solvable_from_its_posts():
    for seed in range(60):
        for difficulty in DIFFICULTIES:
            profile = _generate(seed, difficulty)
            text = " ".join(p.text for p in profile.posts).lower()
            persona = profile.persona
            assert persona.pet.name.lower() in text, (seed, difficulty)
            assert str(persona.pet.adoption_year) in text, (seed, difficulty)
            for component in bind_password(persona, difficulty).components:
                assert component.lower() in text, (seed, difficulty, component)


def test_faker_source_profiles_stay_solvable():
    for seed in range(15):
        profile = generate_profile("medium", seed, source=FakerNameSource(), reference_year=YEAR)
        text = " ".join(p.text for p in profile.posts).lower()
        assert profile.persona.pet.name.lower() in text
        assert str(profile.persona.pet.adoption_year) in text


def test_generation_ignores_environment():
    baseline = generate_profile("easy", 42)
    env = {"PERSONA_FORGE_NAME_SOURCE": "faker", "PERSONA_FORGE_REFERENCE_YEAR": "2030"}
    with patch.dict(os.environ, env):
        assert generate_profile("easy", 42) == baseline
    assert baseline.password == "luna2020"
    assert baseline.persona.reference_year == DEFAULT_REFERENCE_YEAR


def test_posts_are_most_recent_first():
    dates = [p.date for p in _generate(7).posts]
    assert dates == sorted(dates, reverse=True)


def test_post_cosmetics_within_bounds():
    profile = _generate(1234, "hard")
    assert len(profile.posts) >= 12
    for post in profile.posts:
        assert 10 <= post.likes <= 500
        assert 1 <= post.reposts <= 50
        assert 0 <= post.replies <= 30
        assert int(post.date[:4]) in (YEAR, YEAR - 1)
        index = int(post.id) - 1
        assert (post.media is not None) == ((profile.seed + index) % 3 == 0)


def test_public_profile_fields():
    profile = _generate(42)
    p = profile.profile
    assert re.fullmatch(r"[a-z0-9_.]+", p.handle)
    assert p.location == profile.persona.city
    assert p.avatar_url.startswith("https://api.dicebear.com/7.x/")
    assert p.avatar_url.endswith("seed=42")
    assert p.cover_url == "https://picsum.photos/1500/500?random=43"
    assert p.joined.startswith("Joined ")
    assert 100 <= p.following <= 800
    assert 50 <= p.followers <= 1000


def test_different_seeds_reference_different_images():
    assert _generate(1).profile.cover_url != _generate(2).profile.cover_url


def test_seed_drawn_from_injected_factory():
    seeds = SeedFactory(clock=lambda: 1000, jitter=lambda: 5)
    first = generate_profile("easy", source=PoolNameSource(), reference_year=YEAR, seeds=seeds)
    second = generate_profile("easy", source=PoolNameSource(), reference_year=YEAR, seeds=seeds)
    assert first.seed == 1005
    assert second.seed == 1006


def test_invalid_difficulty_raises_before_drawing_a_seed():
    seeds = MagicMock()
    with pytest.raises(ValueError):
        generate_profile("impossible", seeds=seeds)
    seeds.next_seed.assert_not_called()


def test_public_view_hides_password():
    view = _generate(42).public_view()
    assert "password" not in view
    assert "clues" not in view
    assert "persona" not in view
    assert view["digest"] == "b59c67bf196a4758191e42f76670ceba"


def test_completion_time_is_set_once():
    profile = _generate(42)
    solved = profile.with_completion_time(95.5)
    assert solved.completion_time == 95.5
    assert profile.completion_time is None
    with pytest.raises(ValueError):
        solved.with_completion_time(10)
