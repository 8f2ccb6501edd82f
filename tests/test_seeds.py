import os
from unittest.mock import patch

import pytest

from persona_forge.utils.clock import DEFAULT_REFERENCE_YEAR, reference_year
from persona_forge.utils.seeds import SeedFactory, default_factory


def test_seed_factory_combines_clock_counter_and_jitter():
    seeds = SeedFactory(clock=lambda: 1000, jitter=lambda: 5)
    assert [seeds.next_seed() for _ in range(3)] == [1005, 1006, 1007]


def test_seed_factory_counter_is_per_instance():
    a = SeedFactory(clock=lambda: 0, jitter=lambda: 0)
    b = SeedFactory(clock=lambda: 0, jitter=lambda: 0, start=10)
    a.next_seed()
    assert a.next_seed() == 1
    assert b.next_seed() == 10


def test_rapid_default_seeds_differ():
    seeds = SeedFactory(jitter=lambda: 0)
    assert len({seeds.next_seed() for _ in range(50)}) == 50


def test_default_factory_is_shared():
    assert default_factory() is default_factory()


def test_reference_year_from_env():
    with patch.dict(os.environ, {"PERSONA_FORGE_REFERENCE_YEAR": "2031"}):
        assert reference_year() == 2031


def test_reference_year_defaults_to_fixed_year():
    with patch.dict(os.environ, {"PERSONA_FORGE_REFERENCE_YEAR": ""}):
        assert reference_year() == DEFAULT_REFERENCE_YEAR


def test_reference_year_rejects_garbage():
    with patch.dict(os.environ, {"PERSONA_FORGE_REFERENCE_YEAR": "next"}):
        with pytest.raises(ValueError):
            reference_year()
