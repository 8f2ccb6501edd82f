from typing import Callable

from persona_forge.composers.casual import compose_casual
from persona_forge.composers.commentator import compose_commentator
from persona_forge.composers.corporate import compose_corporate
from persona_forge.composers.creative import compose_creative
from persona_forge.composers.healthcare import compose_healthcare
from persona_forge.composers.hobby import compose_hobby
from persona_forge.composers.internet import compose_internet
from persona_forge.composers.local import compose_local
from persona_forge.composers.parent import compose_parent
from persona_forge.composers.quiet import compose_quiet
from persona_forge.composers.student import compose_student
from persona_forge.composers.tech import compose_tech
from persona_forge.models import Archetype, Persona
from persona_forge.utils.rng import SeededRandom

Composer = Callable[[Persona, SeededRandom], list[str]]

COMPOSERS: dict[Archetype, Composer] = {
    "corporate_professional": compose_corporate,
    "casual_adult": compose_casual,
    "internet_native": compose_internet,
    "hobby_enthusiast": compose_hobby,
    "parent_family": compose_parent,
    "student_young_adult": compose_student,
    "creative_artist": compose_creative,
    "tech_engineering": compose_tech,
    "healthcare_worker": compose_healthcare,
    "local_community": compose_local,
    "opinionated_commentator": compose_commentator,
    "quiet_low_activity": compose_quiet,
}


def compose_posts(persona: Persona, seed: int) -> list[str]:
    """Raw post texts for ``persona``, before voice styling."""
    return COMPOSERS[persona.archetype](persona, SeededRandom(seed))
