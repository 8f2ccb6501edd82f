import re

import pytest

from persona_forge.generators.password import (
    PATTERNS,
    bind_password,
    build_clues,
    derive_password,
    md5_hex,
    select_pattern,
    supporting_posts,
)
from persona_forge.generators.persona import synthesize_persona
from persona_forge.generators.sources import PoolNameSource
from persona_forge.models import DIFFICULTIES, PasswordBinding

YEAR = 2025
LUNA = synthesize_persona(42, source=PoolNameSource(), reference_year=YEAR)


def _pattern(difficulty: str, name: str):
    return next(p for p in PATTERNS[difficulty] if p.name == name)


def test_seed_42_easy_round_trip():
    binding = bind_password(LUNA, "easy")
    assert binding.pattern == "pet_year"
    assert binding.password == "luna2020"
    assert binding.digest == "b59c67bf196a4758191e42f76670ceba"
    assert binding.clues == ["Pet: Luna (dog)", "Pet adoption year: 2020"]


def test_md5_hex_matches_known_digest():
    assert md5_hex("luna2020") == "b59c67bf196a4758191e42f76670ceba"


def test_derive_password_matches_binding():
    for difficulty in DIFFICULTIES:
        assert derive_password(LUNA, difficulty) == bind_password(LUNA, difficulty).password


def test_unknown_difficulty_fails_fast():
    with pytest.raises(ValueError):
        derive_password(LUNA, "nightmare")


def test_hard_pattern_shapes():
    assert _pattern("hard", "pet_reversed_year").build(LUNA) == "luna0202"
    assert _pattern("hard", "leet_pet_year").build(LUNA) == "lun42020"
    assert _pattern("hard", "city_underscore_pet").build(LUNA) == "albuquerque_luna"


def test_medium_patterns_have_no_year():
    for seed in range(40):
        persona = synthesize_persona(seed, reference_year=YEAR)
        assert not re.search(r"\d{4}", derive_password(persona, "medium"))


def test_pattern_choice_is_deterministic():
    for difficulty in DIFFICULTIES:
        assert select_pattern(LUNA, difficulty) == select_pattern(LUNA, difficulty)


def test_leet_pattern_skipped_when_name_has_no_substitutable_letters():
    pet = LUNA.pet.model_copy(update={"name": "Tux"})
    for seed in range(40):
        persona = LUNA.model_copy(update={"pet": pet, "seed": seed})
        assert select_pattern(persona, "hard").name != "leet_pet_year"


def test_clues_are_truthful():
    for seed in range(40):
        persona = synthesize_persona(seed, reference_year=YEAR)
        for difficulty in DIFFICULTIES:
            binding = bind_password(persona, difficulty)
            for clue in binding.clues:
                value = clue.split(": ", 1)[1].split(" (")[0]
                assert value.lower().replace(" ", "") in binding.password, clue


def test_city_with_spaces_is_compacted():
    persona = LUNA.model_copy(update={"city": "Salt Lake City"})
    assert _pattern("medium", "pet_city").build(persona) == "lunasaltlakecity"
    assert "City: Salt Lake City" in build_clues(persona, "lunasaltlakecity")


def test_supporting_posts_cover_names_and_birth_year():
    binding = PasswordBinding(
        pattern="city_birth_year",
        password="x",
        digest=md5_hex("x"),
        components=[LUNA.city, str(LUNA.birth_year), LUNA.first_name],
    )
    text = " ".join(supporting_posts(LUNA, binding, 1))
    assert str(LUNA.birth_year) in text
    assert LUNA.first_name in text


def test_no_supporting_posts_for_pet_patterns():
    assert supporting_posts(LUNA, bind_password(LUNA, "easy"), 1) == []


def _has_transform(persona, password: str) -> bool:
    year = str(persona.pet.adoption_year)
    return "_" in password or password.endswith(year[::-1]) or bool(re.search(r"\d", password[:-4]))


def test_easy_passwords_are_two_plain_components():
    for seed in range(80):
        persona = synthesize_persona(seed, reference_year=YEAR)
        binding = bind_password(persona, "easy")
        assert len(binding.components) <= 2
        assert re.fullmatch(r"[a-z]+\d{4}", binding.password), binding.password
        assert not _has_transform(persona, binding.password), binding.password


def test_hard_passwords_always_carry_a_transform():
    for seed in range(80):
        persona = synthesize_persona(seed, reference_year=YEAR)
        binding = bind_password(persona, "hard")
        assert _has_transform(persona, binding.password), (seed, binding.pattern, binding.password)
