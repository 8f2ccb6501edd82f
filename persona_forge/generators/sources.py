"""Swappable fake-data backends for names, cities and filler words.

The default pool source only depends on SeededRandom, so a seed produces the
same persona regardless of which Faker release is installed.
"""
from typing import Literal, Protocol

from faker import Faker

from persona_forge.utils.rng import SeededRandom

NameKind = Literal["first", "last", "pet"]
WordKind = Literal["noun", "adjective"]

FIRST_NAMES = [
    "Emma", "Liam", "Olivia", "Noah", "Ava", "Ethan", "Sophia", "Mason",
    "Isabella", "Lucas", "Mia", "Logan", "Amelia", "Elijah", "Harper", "Aiden",
    "Evelyn", "Caleb", "Abigail", "Owen", "Chloe", "Henry", "Grace", "Wyatt",
    "Nora", "Julian", "Riley", "Gabriel", "Zoe", "Isaac", "Hannah", "Dylan",
    "Leah", "Carter", "Maya", "Adrian", "Naomi", "Marcus", "Priya", "Diego",
    "Keisha", "Tomas", "Yuki", "Omar", "Sienna", "Rafael", "Ingrid", "Malik",
]

LAST_NAMES = [
    "Anderson", "Bennett", "Carter", "Delgado", "Ellison", "Fischer", "Garcia",
    "Hughes", "Ibarra", "Jensen", "Kowalski", "Lambert", "Morales", "Nakamura",
    "Okafor", "Patel", "Quinn", "Reyes", "Sullivan", "Thompson", "Underwood",
    "Vasquez", "Whitaker", "Xiong", "Young", "Zimmerman", "Brooks", "Coleman",
    "Dawson", "Foster", "Hayes", "Lindqvist", "Moreau", "Novak", "Ramirez",
    "Schmidt", "Tanaka", "Walsh", "Harrington", "Okonkwo",
]

# Every pet name holds at least one of a/e/i/o so its leetspeak form differs.
PET_NAMES = [
    "Biscuit", "Pepper", "Mochi", "Waffles", "Ziggy", "Olive", "Pickles",
    "Nacho", "Hazel", "Bandit", "Cookie", "Maple", "Noodle", "Rocco", "Willow",
    "Pretzel", "Juniper", "Tofu", "Bailey", "Oreo", "Dexter", "Peanut",
    "Cleo", "Gizmo", "Marble", "Toast", "Sadie", "Otis", "Pumpkin", "Winston",
    "Clover", "Bean", "Ginger", "Milo", "Shadow", "Nala", "Chester", "Hank",
    "Luna", "Pixel",
]

CITIES = [
    "Portland", "Austin", "Denver", "Seattle", "Chicago", "Boston", "Nashville",
    "Phoenix", "Atlanta", "Minneapolis", "Pittsburgh", "Sacramento", "Raleigh",
    "Tucson", "Omaha", "Richmond", "Madison", "Boise", "San Diego",
    "Salt Lake City", "Kansas City", "Columbus", "Milwaukee", "Albuquerque",
    "Spokane", "Savannah", "New Orleans", "Baltimore", "Cleveland", "Tampa",
]

NOUNS = [
    "river", "cactus", "lantern", "comet", "pixel", "harbor", "meadow",
    "falcon", "biscuit", "thunder", "garden", "rocket", "cobalt", "maple",
    "signal", "ember", "velvet", "orbit", "canyon", "pebble",
]

ADJECTIVES = [
    "sleepy", "golden", "quiet", "cosmic", "rusty", "lucky", "silver",
    "wild", "tiny", "brave", "lazy", "electric", "mellow", "frosty",
    "sunny", "hollow", "crispy", "velvet", "restless", "gentle",
]


class NameSource(Protocol):
    def seed(self, value: int) -> "NameSource": ...

    def pick_name(self, kind: NameKind = "first") -> str: ...

    def pick_city(self) -> str: ...

    def pick_word(self, kind: WordKind = "noun") -> str: ...


class PoolNameSource:
    """Curated pools drawn with SeededRandom."""

    def __init__(self, seed: int = 0):
        self._rng = SeededRandom(seed)

    def seed(self, value: int) -> "PoolNameSource":
        return PoolNameSource(value)

    def pick_name(self, kind: NameKind = "first") -> str:
        pools = {"first": FIRST_NAMES, "last": LAST_NAMES, "pet": PET_NAMES}
        if kind not in pools:
            raise ValueError(f"Unknown name kind: {kind!r}")
        return self._rng.pick(pools[kind])

    def pick_city(self) -> str:
        return self._rng.pick(CITIES)

    def pick_word(self, kind: WordKind = "noun") -> str:
        if kind == "noun":
            return self._rng.pick(NOUNS)
        if kind == "adjective":
            return self._rng.pick(ADJECTIVES)
        raise ValueError(f"Unknown word kind: {kind!r}")


class FakerNameSource:
    """Faker-backed source; deterministic per seed for a given Faker release."""

    def __init__(self, seed: int = 0, locale: str = "en_US"):
        self._locale = locale
        self._fake = Faker(locale)
        self._fake.seed_instance(seed)

    def seed(self, value: int) -> "FakerNameSource":
        return FakerNameSource(value, self._locale)

    def pick_name(self, kind: NameKind = "first") -> str:
        if kind == "first" or kind == "pet":
            return self._fake.first_name()
        if kind == "last":
            # Some locales emit hyphenated surnames; keep the first part.
            return self._fake.last_name().split("-")[0]
        raise ValueError(f"Unknown name kind: {kind!r}")

    def pick_city(self) -> str:
        return self._fake.city()

    def pick_word(self, kind: WordKind = "noun") -> str:
        if kind not in ("noun", "adjective"):
            raise ValueError(f"Unknown word kind: {kind!r}")
        return self._fake.word(part_of_speech=kind)


def make_source(name: str = "pool", seed: int = 0) -> NameSource:
    """Build a name source by its config name ("pool" or "faker")."""
    if name == "pool":
        return PoolNameSource(seed)
    if name == "faker":
        return FakerNameSource(seed)
    raise ValueError(f"Unknown name source: {name!r}. Use 'pool' or 'faker'.")
