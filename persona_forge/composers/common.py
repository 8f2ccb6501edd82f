"""Helpers shared by the archetype composers."""
from typing import NamedTuple

from persona_forge.models import Friend, Persona
from persona_forge.utils.rng import SeededRandom

POSTS_PER_PERSONA = 12

_EMOJI_RATES = {"never": 0.0, "rare": 0.15, "occasional": 0.35, "frequent": 0.6}


class Pronouns(NamedTuple):
    subject: str
    object: str
    possessive: str


def pet_pronouns(rng: SeededRandom) -> Pronouns:
    """Pick one pronoun set so a persona never flips between him and her."""
    if rng.boolean():
        return Pronouns("she", "her", "her")
    return Pronouns("he", "him", "his")


def pet_years(persona: Persona) -> int:
    return max(persona.reference_year - persona.pet.adoption_year, 1)


def pet_tenure(persona: Persona) -> str:
    years = pet_years(persona)
    return "a year" if years == 1 else f"{years} years"


def emoji(persona: Persona, rng: SeededRandom, choices: list[str]) -> str:
    """Return " <emoji>" or "" according to the persona's emoji frequency."""
    if rng.boolean(_EMOJI_RATES[persona.voice.emoji_frequency]):
        return " " + rng.pick(choices)
    return ""


def other_friend(persona: Persona, friend: Friend) -> Friend:
    return next(f for f in persona.friends if f != friend)


def finish(posts: list[str], rng: SeededRandom) -> list[str]:
    """Shuffle so the clue posts land at a different position every round."""
    return rng.shuffle(posts)
