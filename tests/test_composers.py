import pytest

from persona_forge.composers.common import POSTS_PER_PERSONA
from persona_forge.composers.registry import COMPOSERS, compose_posts
from persona_forge.generators.persona import synthesize_persona
from persona_forge.models import ARCHETYPES

YEAR = 2025


def _personas_by_archetype(limit: int = 400) -> dict:
    found = {}
    for seed in range(limit):
        persona = synthesize_persona(seed, reference_year=YEAR)
        found.setdefault(persona.archetype, []).append(persona)
    return found


PERSONAS = _personas_by_archetype()


def test_registry_covers_every_archetype():
    assert set(COMPOSERS) == set(ARCHETYPES)


@pytest.mark.parametrize("archetype", ARCHETYPES)
def test_composer_emits_fixed_post_count(archetype):
    for persona in PERSONAS[archetype][:5]:
        assert len(compose_posts(persona, persona.seed)) == POSTS_PER_PERSONA


@pytest.mark.parametrize("archetype", ARCHETYPES)
def test_composer_embeds_pet_clue_and_city(archetype):
    for persona in PERSONAS[archetype]:
        posts = compose_posts(persona, persona.seed)
        pet_posts = [
            p for p in posts
            if persona.pet.name.lower() in p.lower() and str(persona.pet.adoption_year) in p
        ]
        assert pet_posts, f"no pet clue post for seed {persona.seed}"
        assert any(persona.city.lower() in p.lower() for p in posts), f"no city post for seed {persona.seed}"


@pytest.mark.parametrize("archetype", ARCHETYPES)
def test_composer_is_deterministic(archetype):
    persona = PERSONAS[archetype][0]
    assert compose_posts(persona, 99) == compose_posts(persona, 99)


def test_different_seeds_vary_phrasing():
    persona = PERSONAS["corporate_professional"][0]
    variants = {tuple(compose_posts(persona, seed)) for seed in range(10)}
    assert len(variants) > 1


def test_friend_handles_are_mentioned():
    for archetype in ARCHETYPES:
        persona = PERSONAS[archetype][0]
        text = " ".join(compose_posts(persona, persona.seed))
        assert any(f.handle in text for f in persona.friends), archetype
