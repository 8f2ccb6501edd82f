from persona_forge.generators.persona import fancy_text, synthesize_persona
from persona_forge.generators.sources import FakerNameSource, PoolNameSource
from persona_forge.models import ARCHETYPES

YEAR = 2025


def test_same_seed_gives_identical_persona():
    a = synthesize_persona(1234, reference_year=YEAR)
    b = synthesize_persona(1234, reference_year=YEAR)
    assert a == b
    assert a.model_dump() == b.model_dump()


def test_seed_42_pet_and_archetype():
    persona = synthesize_persona(42, source=PoolNameSource(), reference_year=YEAR)
    assert persona.pet.name == "Luna"
    assert persona.pet.adoption_year == 2020
    assert persona.pet.species == "dog"
    assert persona.archetype == "local_community"
    assert persona.first_name == "Yuki"
    assert persona.city == "Albuquerque"


def test_birth_year_matches_age_and_reference_year():
    for seed in range(20):
        persona = synthesize_persona(seed, reference_year=YEAR)
        assert persona.birth_year == YEAR - persona.age


def test_archetype_age_ranges():
    ranges = {
        "student_young_adult": (19, 25),
        "internet_native": (20, 27),
        "parent_family": (28, 45),
        "corporate_professional": (27, 42),
    }
    for seed in range(200):
        persona = synthesize_persona(seed, reference_year=YEAR)
        low, high = ranges.get(persona.archetype, (24, 40))
        assert low <= persona.age <= high


def test_field_cardinalities():
    for seed in range(50):
        p = synthesize_persona(seed, reference_year=YEAR)
        assert len(p.traits) == 3 and len(set(p.traits)) == 3
        assert 2 <= len(p.interests) <= 4
        assert len(p.pet_peeves) == 3
        assert len(p.quirks) == 2
        assert len(p.friends) == 2
        assert all(f.handle.startswith("@") for f in p.friends)
        assert len(p.recent_events) == 3
        assert [e.days_ago for e in p.recent_events] == sorted(e.days_ago for e in p.recent_events)
        assert len(p.current_struggles) == 2
        assert len(p.current_joys) == 1
        assert 2010 <= p.pet.adoption_year <= 2023


def test_all_archetypes_reachable():
    seen = {synthesize_persona(seed, reference_year=YEAR).archetype for seed in range(300)}
    assert seen == set(ARCHETYPES)


def test_pet_year_does_not_depend_on_name_source():
    pool = synthesize_persona(77, source=PoolNameSource(), reference_year=YEAR)
    faker = synthesize_persona(77, source=FakerNameSource(), reference_year=YEAR)
    assert pool.archetype == faker.archetype
    assert pool.pet.adoption_year == faker.pet.adoption_year
    assert pool.pet.species == faker.pet.species


def test_quiet_personas_have_no_filler_phrases():
    for seed in range(300):
        p = synthesize_persona(seed, reference_year=YEAR)
        if p.archetype == "quiet_low_activity":
            assert p.voice.recurring_phrases == []
            assert p.voice.emoji_frequency == "never"


def test_fancy_text_maps_letters_only():
    assert fancy_text("ab1") == "\U0001D482\U0001D483" + "1"
