"""Derive the round password from persona fields and describe its clues."""
import hashlib
from typing import Callable, NamedTuple

from persona_forge.models import DIFFICULTIES, Persona, PasswordBinding
from persona_forge.utils.rng import SeededRandom

PASSWORD_SEED_OFFSET = 5000

LEET = str.maketrans({"a": "4", "e": "3", "i": "1", "o": "0"})


def _compact(value: str) -> str:
    return value.lower().replace(" ", "")


def md5_hex(password: str) -> str:
    """Digest shown to the player. MD5 is deliberate: the puzzle is to crack it."""
    return hashlib.md5(password.encode("utf-8")).hexdigest()


class Pattern(NamedTuple):
    name: str
    build: Callable[[Persona], str]
    components: Callable[[Persona], list[str]]
    eligible: Callable[[Persona], bool] = lambda p: True


def _pet(p: Persona) -> str:
    return _compact(p.pet.name)


PATTERNS: dict[str, list[Pattern]] = {
    "easy": [
        Pattern("pet_year",
                lambda p: f"{_pet(p)}{p.pet.adoption_year}",
                lambda p: [p.pet.name, str(p.pet.adoption_year)]),
        Pattern("city_birth_year",
                lambda p: f"{_compact(p.city)}{p.birth_year}",
                lambda p: [p.city, str(p.birth_year)]),
        Pattern("first_name_year",
                lambda p: f"{_compact(p.first_name)}{p.pet.adoption_year}",
                lambda p: [p.first_name, str(p.pet.adoption_year)]),
    ],
    "medium": [
        Pattern("pet_city",
                lambda p: f"{_pet(p)}{_compact(p.city)}",
                lambda p: [p.pet.name, p.city]),
        Pattern("first_name_pet",
                lambda p: f"{_compact(p.first_name)}{_pet(p)}",
                lambda p: [p.first_name, p.pet.name]),
        Pattern("last_name_pet",
                lambda p: f"{_compact(p.last_name)}{_pet(p)}",
                lambda p: [p.last_name, p.pet.name]),
    ],
    "hard": [
        Pattern("pet_reversed_year",
                lambda p: f"{_pet(p)}{str(p.pet.adoption_year)[::-1]}",
                lambda p: [p.pet.name, str(p.pet.adoption_year)]),
        Pattern("leet_pet_year",
                lambda p: f"{_pet(p).translate(LEET)}{p.pet.adoption_year}",
                lambda p: [p.pet.name, str(p.pet.adoption_year)],
                lambda p: _pet(p).translate(LEET) != _pet(p)),
        Pattern("city_underscore_pet",
                lambda p: f"{_compact(p.city)}_{_pet(p)}",
                lambda p: [p.city, p.pet.name]),
    ],
}


def validate_difficulty(difficulty: str) -> None:
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {difficulty!r}. Use one of {', '.join(DIFFICULTIES)}.")


def build_clues(persona: Persona, password: str) -> list[str]:
    """Human-readable clues, kept only when the value appears in the password."""
    candidates = [
        (persona.pet.name, f"Pet: {persona.pet.name} ({persona.pet.species})"),
        (str(persona.pet.adoption_year), f"Pet adoption year: {persona.pet.adoption_year}"),
        (str(persona.birth_year), f"Birth year: {persona.birth_year}"),
        (persona.city, f"City: {persona.city}"),
        (persona.first_name, f"First name: {persona.first_name}"),
        (persona.last_name, f"Last name: {persona.last_name}"),
    ]
    return [label for value, label in candidates if _compact(value) in password]


def select_pattern(persona: Persona, difficulty: str) -> Pattern:
    validate_difficulty(difficulty)
    eligible = [pattern for pattern in PATTERNS[difficulty] if pattern.eligible(persona)]
    return SeededRandom(persona.seed + PASSWORD_SEED_OFFSET).pick(eligible)


def bind_password(persona: Persona, difficulty: str) -> PasswordBinding:
    pattern = select_pattern(persona, difficulty)
    password = pattern.build(persona)
    return PasswordBinding(
        pattern=pattern.name,
        password=password,
        digest=md5_hex(password),
        components=pattern.components(persona),
        clues=build_clues(persona, password),
    )


def derive_password(persona: Persona, difficulty: str) -> str:
    return select_pattern(persona, difficulty).build(persona)


def supporting_posts(persona: Persona, binding: PasswordBinding, seed: int) -> list[str]:
    """Extra posts for password components the archetype posts don't cover.

    Pet name, adoption year and city are always present in composed posts;
    first name, last name and birth year are not.
    """
    rng = SeededRandom(seed)
    posts = []
    if persona.first_name in binding.components or persona.last_name in binding.components:
        posts.append(rng.pick([
            f"Got a package addressed to \"{persona.first_name} {persona.last_name}\" with three typos in it. Impressive.",
            f"Name tag at the {persona.occupation.title.lower()} meetup said {persona.first_name} {persona.last_name}. "
            "Finally someone spelled it right.",
            f"Every barista writes {persona.first_name} wrong. {persona.first_name} {persona.last_name}, it's not that hard.",
        ]))
    if str(persona.birth_year) in binding.components:
        posts.append(rng.pick([
            f"Born in {persona.birth_year} and my back already sounds like bubble wrap.",
            f"Class of {persona.birth_year} babies, how are we feeling about turning {persona.age}?",
            f"{persona.age} today. Still can't believe I was born in {persona.birth_year}.",
        ]))
    return posts
