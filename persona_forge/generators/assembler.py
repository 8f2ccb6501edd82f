"""Assemble persona, styled posts and password into one GeneratedProfile."""
import calendar
import logging
import re
from typing import Optional

from persona_forge.composers.registry import compose_posts
from persona_forge.generators.password import bind_password, supporting_posts, validate_difficulty
from persona_forge.generators.persona import synthesize_persona
from persona_forge.generators.sources import NameSource, PoolNameSource
from persona_forge.generators.voice import style
from persona_forge.models import GeneratedProfile, PasswordBinding, Persona, Post, PublicProfile
from persona_forge.utils.clock import DEFAULT_REFERENCE_YEAR
from persona_forge.utils.rng import SeededRandom
from persona_forge.utils.seeds import SeedFactory, default_factory

_log = logging.getLogger(__name__)

SUPPORT_SEED_OFFSET = 2000
META_SEED_OFFSET = 3000
HANDLE_SEED_OFFSET = 4000

AVATAR_STYLES = {
    "corporate_professional": "personas",
    "casual_adult": "micah",
    "internet_native": "pixel-art",
    "hobby_enthusiast": "adventurer",
    "parent_family": "avataaars",
    "student_young_adult": "lorelei",
    "creative_artist": "adventurer-neutral",
    "tech_engineering": "bottts",
    "healthcare_worker": "personas",
    "local_community": "micah",
    "opinionated_commentator": "notionists",
    "quiet_low_activity": "shapes",
}

_TLDS = ["com", "net", "io", "me", "blog"]


def image_url(seed: int, width: int, height: int) -> str:
    return f"https://picsum.photos/{width}/{height}?random={seed}"


def avatar_url(archetype: str, seed: int) -> str:
    return f"https://api.dicebear.com/7.x/{AVATAR_STYLES[archetype]}/svg?seed={seed}"


def make_handle(persona: Persona, names: NameSource, rng: SeededRandom) -> str:
    """Archetype-flavoured username, without the leading "@"."""
    first = persona.first_name.lower()
    last = persona.last_name.lower()
    archetype = persona.archetype
    if archetype in ("corporate_professional", "healthcare_worker", "local_community"):
        options = [f"{first}.{last}", f"{first}_{last}", f"{first}{last}", f"{first}{rng.int(1, 99)}"]
    elif archetype in ("internet_native", "student_young_adult"):
        options = [
            f"{first}{names.pick_word('adjective')}",
            f"{names.pick_word('adjective')}{first}",
            f"{first}{names.pick_word('noun')}",
            f"xx{first}xx",
        ]
    elif archetype == "creative_artist":
        options = [f"{first}creates", f"{first}art", f"{names.pick_word('adjective')}{first}", f"studio{first}"]
    else:
        options = [f"{first}{rng.int(1, 999)}", f"{first}_{names.pick_word('noun')}", f"{first}{last[:1]}"]
    return re.sub(r"[^a-z0-9_.]", "", rng.pick(options).lower())


def _post_date(persona: Persona, rng: SeededRandom) -> str:
    year = persona.reference_year - rng.int(0, 1)
    return f"{year}-{rng.int(1, 12):02d}-{rng.int(1, 28):02d}"


def assemble_profile(
    persona: Persona,
    texts: list[str],
    binding: PasswordBinding,
    seed: int,
    difficulty: str,
    *,
    source: Optional[NameSource] = None,
) -> GeneratedProfile:
    """Attach cosmetic fields to already-styled posts.

    Clue presence is not checked here; the clue-consistency tests guard it.
    """
    rng = SeededRandom(seed + META_SEED_OFFSET)
    names = (source or PoolNameSource()).seed(seed + HANDLE_SEED_OFFSET)

    posts = [
        Post(
            id=str(i + 1),
            text=text,
            date=_post_date(persona, rng),
            likes=rng.int(10, 500),
            reposts=rng.int(1, 50),
            replies=rng.int(0, 30),
            media=image_url(seed + i + 300, 800, 600) if (seed + i) % 3 == 0 else None,
        )
        for i, text in enumerate(texts)
    ]
    posts.sort(key=lambda p: p.date, reverse=True)

    handle = make_handle(persona, names, rng)
    joined_year = persona.reference_year - rng.int(0, 4)
    profile = PublicProfile(
        handle=handle,
        display_name=persona.display_name,
        bio=persona.bio,
        location=persona.city,
        website=f"https://{handle.replace('.', '').replace('_', '')}.{rng.pick(_TLDS)}",
        joined=f"Joined {calendar.month_name[rng.int(1, 12)]} {joined_year}",
        following=rng.int(100, 800),
        followers=rng.int(50, 1000),
        avatar_url=avatar_url(persona.archetype, seed),
        cover_url=image_url(seed + 1, 1500, 500),
    )

    return GeneratedProfile(
        seed=seed,
        difficulty=difficulty,
        persona=persona,
        profile=profile,
        posts=posts,
        password=binding.password,
        digest=binding.digest,
        clues=binding.clues,
    )


def generate_profile(
    difficulty: str = "easy",
    seed: Optional[int] = None,
    *,
    source: Optional[NameSource] = None,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
    seeds: Optional[SeedFactory] = None,
) -> GeneratedProfile:
    """Generate one puzzle round end to end.

    With a fixed ``seed`` the result is identical on every call; nothing is
    read from the environment or the calendar. Callers at the edge pass the
    configured ``source`` and ``reference_year``. Without a seed, one is
    drawn from ``seeds``.
    """
    validate_difficulty(difficulty)
    if seed is None:
        seed = (seeds or default_factory()).next_seed()
    if source is None:
        source = PoolNameSource()

    persona = synthesize_persona(seed, source=source, reference_year=reference_year)
    binding = bind_password(persona, difficulty)
    texts = compose_posts(persona, seed)
    texts += supporting_posts(persona, binding, seed + SUPPORT_SEED_OFFSET)

    protected = (*persona.clue_tokens(), *binding.components, *(f.handle for f in persona.friends))
    styled = [style(text, persona.voice, seed + i, protected) for i, text in enumerate(texts)]

    profile = assemble_profile(persona, styled, binding, seed, difficulty, source=source)
    _log.debug(
        "generated profile seed=%s archetype=%s difficulty=%s pattern=%s posts=%d",
        seed, persona.archetype, difficulty, binding.pattern, len(profile.posts),
    )
    return profile
