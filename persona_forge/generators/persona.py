"""Seeded persona synthesis: identity, lifestyle, voice and pet for one round."""
from typing import Optional

from persona_forge.generators.sources import NameSource, PoolNameSource
from persona_forge.models import (
    ARCHETYPES,
    Archetype,
    Friend,
    Interest,
    LifeEvent,
    Lifestyle,
    Occupation,
    Persona,
    Pet,
    VoiceProfile,
)
from persona_forge.utils.clock import DEFAULT_REFERENCE_YEAR
from persona_forge.utils.rng import SeededRandom

PERSONA_SEED_OFFSET = 1000
ADOPTION_YEARS = (2010, 2023)

_AGE_RANGES: dict[str, tuple[int, int]] = {
    "student_young_adult": (19, 25),
    "internet_native": (20, 27),
    "parent_family": (28, 45),
    "corporate_professional": (27, 42),
}
_DEFAULT_AGE_RANGE = (24, 40)

_COMPANY_SUFFIXES = ["Group", "& Co", "Partners", "Inc", "Holdings", "Labs", "Systems", "Solutions"]

# (title, workplace template, likes, dislikes). Workplace templates may use
# {company} and {city}.
_OCCUPATIONS: dict[str, list[tuple[str, str, list[str], list[str]]]] = {
    "corporate_professional": [
        ("Account Manager", "{company}", ["client relationships", "sales targets", "networking"],
         ["long meetings", "competing priorities", "email overload"]),
        ("Senior Consultant", "{company} Consulting", ["strategy work", "presentations", "travel perks"],
         ["constant travel", "tight deadlines", "scope changes"]),
        ("Marketing Director", "{company}", ["campaign planning", "data analysis", "brand building"],
         ["budget constraints", "stakeholder management", "last-minute changes"]),
        ("Product Manager", "{company}", ["roadmap planning", "user feedback", "launches"],
         ["conflicting priorities", "technical debt", "stakeholder alignment"]),
    ],
    "casual_adult": [
        ("Office Administrator", "{company}", ["organization", "coffee breaks", "helping coworkers"],
         ["printer jams", "scheduling conflicts", "budget cuts"]),
        ("Retail Manager", "{company}", ["inventory organization", "employee development", "sales goals"],
         ["difficult customers", "staffing issues", "weekend shifts"]),
        ("Customer Service Rep", "{company}", ["problem solving", "helping people", "quiet days"],
         ["angry customers", "metrics", "repetitive questions"]),
        ("Administrative Assistant", "{company}", ["staying organized", "office culture", "efficient workflows"],
         ["last-minute requests", "unclear instructions", "being undervalued"]),
    ],
    "internet_native": [
        ("Video Editor", "freelance", ["editing software", "creative projects", "online communities"],
         ["client revisions", "render times", "unclear briefs"]),
        ("Social Media Coordinator", "{company}", ["content creation", "engagement metrics", "trends"],
         ["algorithm changes", "comment moderation", "unrealistic expectations"]),
        ("Content Creator", "self-employed", ["video editing", "community building", "creative freedom"],
         ["burnout", "algorithm changes", "inconsistent income"]),
        ("Freelance Designer", "freelance", ["creative work", "flexible schedule", "side projects"],
         ["difficult clients", "unpredictable income", "self-promotion"]),
    ],
    "hobby_enthusiast": [
        ("Software Developer", "{company}", ["side projects", "learning new tech", "conferences"],
         ["legacy code", "meetings", "unclear requirements"]),
        ("Accountant", "{company}", ["number accuracy", "organization", "closing out tax season"],
         ["tax season stress", "client disorganization", "regulation changes"]),
        ("Librarian", "{city} Public Library", ["book recommendations", "helping patrons", "quiet reading time"],
         ["budget cuts", "system outages", "loud patrons"]),
    ],
    "parent_family": [
        ("Elementary Teacher", "{city} Elementary", ["student progress", "lesson planning", "summer break"],
         ["parent emails", "admin work", "lack of supplies"]),
        ("HR Specialist", "{company}", ["employee relations", "work-life balance", "company culture"],
         ["difficult conversations", "compliance paperwork", "being the bad guy"]),
        ("Real Estate Agent", "{company} Realty", ["helping families", "closing deals", "flexible schedule"],
         ["weekend showings", "demanding clients", "market swings"]),
    ],
    "student_young_adult": [
        ("College Student", "{city} University", ["learning", "campus life", "avoiding assignments"],
         ["exams", "group projects", "being broke"]),
        ("Grad Student", "{city} University", ["research", "teaching", "academic community"],
         ["advisor meetings", "funding stress", "imposter syndrome"]),
        ("Barista", "{company} Coffee", ["latte art", "regular customers", "free coffee"],
         ["early mornings", "entitled customers", "minimum wage"]),
        ("Retail Associate", "{company}", ["employee discount", "coworker friendships", "easy shifts"],
         ["rude customers", "standing all day", "unpredictable schedule"]),
    ],
    "creative_artist": [
        ("Graphic Designer", "freelance", ["typography", "color theory", "creative freedom"],
         ["client feedback", "scope creep", "deadlines"]),
        ("Illustrator", "self-employed", ["drawing", "commission work", "art community"],
         ["art block", "underpricing", "exposure requests"]),
        ("Photographer", "freelance", ["composition", "editing", "creative projects"],
         ["difficult clients", "equipment costs", "inconsistent work"]),
        ("Writer", "freelance", ["storytelling", "research", "editing"],
         ["writer's block", "rejection", "low pay"]),
    ],
    "tech_engineering": [
        ("Software Engineer", "{company}", ["coding", "system design", "new technologies"],
         ["legacy code", "unclear requirements", "too many meetings"]),
        ("DevOps Engineer", "{company}", ["automation", "infrastructure", "optimization"],
         ["on-call rotations", "production incidents", "tech debt"]),
        ("Data Analyst", "{company}", ["finding insights", "visualization", "clean data"],
         ["messy data", "unclear questions", "data quality issues"]),
        ("IT Support Specialist", "{company}", ["problem solving", "helping users", "learning systems"],
         ["user error", "ticket volume", "being blamed"]),
    ],
    "healthcare_worker": [
        ("Registered Nurse", "{city} General Hospital", ["patient care", "coworker support", "learning"],
         ["understaffing", "long shifts", "difficult patients"]),
        ("Physical Therapist", "{company} Clinic", ["helping recovery", "patient progress", "movement science"],
         ["insurance paperwork", "no-shows", "documentation burden"]),
        ("Medical Assistant", "{company} Medical", ["patient interaction", "routine", "helping people"],
         ["long hours", "difficult patients", "administrative work"]),
    ],
    "local_community": [
        ("Small Business Owner", "self-employed", ["serving the community", "independence", "regular customers"],
         ["unpredictable revenue", "long hours", "competition"]),
        ("Elementary Teacher", "{city} Elementary", ["teaching kids", "community impact", "summers off"],
         ["pay", "parent complaints", "admin work"]),
        ("Postal Worker", "USPS", ["routine", "being outside", "knowing neighbors"],
         ["weather", "dogs", "package volume"]),
    ],
    "opinionated_commentator": [
        ("Journalist", "{company} News", ["reporting", "investigation", "public discourse"],
         ["deadlines", "editorial constraints", "public backlash"]),
        ("Policy Analyst", "{company} Institute", ["research", "writing reports", "public policy"],
         ["political gridlock", "funding", "being misquoted"]),
        ("Teacher", "{city} High School", ["education", "student growth", "curriculum"],
         ["standardized testing", "politics in education", "lack of resources"]),
    ],
    "quiet_low_activity": [
        ("Data Entry Clerk", "{company}", ["routine work", "accuracy", "quiet time"],
         ["repetitive tasks", "eye strain", "tight deadlines"]),
        ("Lab Technician", "{company} Labs", ["precision work", "research", "quiet environment"],
         ["equipment failures", "contamination", "long processes"]),
        ("Archivist", "{city} Museum", ["preservation", "organization", "historical research"],
         ["limited budget", "physical demands", "climate control issues"]),
    ],
}

_HOBBIES = ["reading", "gaming", "cooking", "hiking", "photography", "writing",
            "drawing", "music", "gardening", "crafts"]
_INTEREST_LEVELS = ("casual", "serious", "obsessed")
_INTEREST_SINCE = ["childhood", "college", "recently", "a few years ago"]

_PET_PERSONALITIES = ["energetic", "lazy", "anxious", "chill", "needy", "independent"]
_PET_FUN_FACTS = [
    "hates the mailman",
    "steals socks",
    "loves pizza crusts",
    "is scared of plastic bags",
    "sleeps in weird positions",
]

_EVENTS = [
    ("started a new project at work", "excited but nervous", True),
    ("friend visited from out of town", "happy", False),
    ("got sick for a week", "frustrated", False),
    ("binged an entire show", "satisfied but unproductive", False),
    ("had a really good meal at a new restaurant", "content", False),
    ("car broke down", "stressed", True),
    ("adopted a new routine", "hopeful", True),
]

_FRIEND_RELATIONSHIPS = (
    ["college friend", "high school friend", "old roommate", "childhood friend"],
    ["coworker", "work friend", "gym buddy", "neighbor"],
)

_HOUSING = ["apartment alone", "apartment with roommate", "house with partner", "parents' house"]
_NEIGHBORHOODS = ["quiet", "busy", "suburban", "downtown"]
_COMMUTES = ["walk", "15 minute drive", "bus", "work from home"]
_WAKE_TIMES = ["6am", "7am", "8am", "9am", "whenever"]
_SLEEP_TIMES = ["10pm", "11pm", "midnight", "1am", "2am"]
_BEVERAGES = ["multiple cups of coffee daily", "one good cup of coffee", "tea person actually", "energy drinks"]
_MEALS = ["meal prep sundays", "takeout most days", "cook when motivated", "skip breakfast always"]
_TRAITS = ["anxious", "chill", "ambitious", "lazy", "overthinker", "spontaneous", "organized", "messy"]
_PET_PEEVES = ["slow walkers", "loud chewing", "people who don't signal", "being late",
               "small talk", "phone calls"]
_QUIRKS = ["always cold", "night owl", "talks to self", "collects weird things", "never answers texts"]
_RELATIONSHIPS = ["single", "in a relationship", "it's complicated", "not looking"]
_SOCIAL_ENERGY = ("introvert", "extrovert", "ambivert")
_STRUGGLES = ["sleep schedule is messed up", "procrastinating on an important thing",
              "spending too much money", "not exercising enough", "phone addiction"]
_JOYS = ["new hobby", "good friend group", "finally feeling rested", "nice weather lately"]


# ── Voice ────────────────────────────────────────────────────────────────────

def _voice_for(archetype: Archetype, rng: SeededRandom) -> VoiceProfile:
    a = archetype
    if a == "corporate_professional":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency=rng.pick(("never", "rare")), slang_level="none",
            typo_tendency="careful", sentence_length=rng.pick(("mixed", "rambling")),
            recurring_phrases=rng.picks(["Congrats", "Looking forward", "Great to see", "Grateful"], rng.int(1, 2)),
        )
    if a == "casual_adult":
        return VoiceProfile(
            punctuation=rng.pick(("minimal", "normal")), capitalization=rng.pick(("normal", "mixed")),
            emoji_frequency=rng.pick(("rare", "occasional")), slang_level=rng.pick(("none", "some")),
            typo_tendency="occasional", sentence_length="mixed",
            recurring_phrases=rng.picks(["lol", "honestly", "literally", "omg"], rng.int(1, 3)),
        )
    if a == "internet_native":
        return VoiceProfile(
            punctuation="minimal", capitalization="lowercase",
            emoji_frequency=rng.pick(("occasional", "frequent")), slang_level="heavy",
            typo_tendency=rng.pick(("occasional", "frequent")), sentence_length="short",
            recurring_phrases=rng.picks(["ngl", "fr", "lmao", "tbh", "rn", "omg", "literally"], rng.int(3, 5)),
        )
    if a == "hobby_enthusiast":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency=rng.pick(("rare", "occasional")), slang_level="some",
            typo_tendency="occasional", sentence_length=rng.pick(("mixed", "rambling")),
            recurring_phrases=rng.picks(["honestly", "finally", "love this"], rng.int(1, 2)),
        )
    if a == "parent_family":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency="occasional", slang_level="none",
            typo_tendency="occasional", sentence_length="mixed",
            recurring_phrases=rng.picks(["Exhausted", "So proud", "Send coffee", "Anyone else?"], rng.int(1, 2)),
        )
    if a == "student_young_adult":
        return VoiceProfile(
            punctuation=rng.pick(("minimal", "normal")),
            capitalization=rng.pick(("lowercase", "normal", "mixed")),
            emoji_frequency=rng.pick(("occasional", "frequent")), slang_level=rng.pick(("some", "heavy")),
            typo_tendency="occasional", sentence_length="mixed",
            recurring_phrases=rng.picks(["lol", "omg", "literally", "tbh", "ngl"], rng.int(2, 4)),
        )
    if a == "creative_artist":
        return VoiceProfile(
            punctuation=rng.pick(("minimal", "normal", "excessive")),
            capitalization=rng.pick(("normal", "mixed")),
            emoji_frequency=rng.pick(("occasional", "frequent")), slang_level="some",
            typo_tendency="occasional", sentence_length=rng.pick(("mixed", "rambling")),
            recurring_phrases=rng.picks(["ugh", "love this", "honestly", "so tired"], rng.int(1, 3)),
        )
    if a == "tech_engineering":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency=rng.pick(("never", "rare")), slang_level="some",
            typo_tendency="careful", sentence_length="mixed",
            recurring_phrases=rng.picks(["finally", "honestly", "lol"], rng.int(1, 2)),
        )
    if a == "healthcare_worker":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency="rare", slang_level="some",
            typo_tendency="occasional", sentence_length="mixed",
            recurring_phrases=rng.picks(["Exhausted", "Long shift", "Finally home"], rng.int(1, 2)),
        )
    if a == "local_community":
        return VoiceProfile(
            punctuation="normal", capitalization="normal",
            emoji_frequency="occasional", slang_level="none",
            typo_tendency="careful", sentence_length="mixed",
            recurring_phrases=rng.picks(["Love seeing this", "Shop local", "Proud of this town"], rng.int(1, 2)),
        )
    if a == "opinionated_commentator":
        return VoiceProfile(
            punctuation=rng.pick(("normal", "excessive")), capitalization="normal",
            emoji_frequency="never", slang_level="none",
            typo_tendency="careful", sentence_length="rambling",
            recurring_phrases=rng.picks(["Honestly", "Think about that", "Absurd", "We need to talk about this"],
                                        rng.int(1, 3)),
        )
    return VoiceProfile(
        punctuation="normal", capitalization="normal",
        emoji_frequency="never", slang_level="none",
        typo_tendency="careful", sentence_length="short",
        recurring_phrases=[],
    )


# ── Bio & display name ───────────────────────────────────────────────────────

def _bio_for(archetype: Archetype, occupation: Occupation, city: str, pet: Pet, rng: SeededRandom) -> str:
    title = occupation.title
    work = occupation.workplace
    parent_word = rng.pick(("dad", "mom"))
    templates = {
        "corporate_professional": [
            f"{title} @ {work} | {city} | Views are my own",
            f"{title} | {city} based | {pet.species} {parent_word}",
            f"{title} | {city} | {pet.name}'s human",
            f"{title} @ {work} | MBA | {city}",
        ],
        "casual_adult": [
            f"{title}. {city} based. {pet.species} {parent_word} to {pet.name}",
            f"{title}. Coffee dependent. {city}.",
            f"{city} | {title} | {pet.species} parent 🐾",
            f"Just trying to survive. {title}. {city}.",
        ],
        "internet_native": [
            f"{rng.int(20, 27)} | {title.lower()} | {city.lower()} | void screaming",
            f"{title.lower()} | chronically online | {pet.name.lower()}'s human",
            f"{city.lower()} based | {title.lower()} | professional mess",
        ],
        "hobby_enthusiast": [
            f"{title} | {city} | Passionate about {rng.pick(_HOBBIES)}",
            f"{title}. {city}. Weekend {rng.pick(['hiker', 'photographer', 'gamer', 'cook'])}.",
            f"{city} based {title}. {pet.species} lover. Hobby collector.",
        ],
        "parent_family": [
            f"{title} | Parent to {rng.int(1, 3)} | {city}",
            f"{parent_word.capitalize()} | {title} | {city} | Coffee powered",
            f"{title}. Parent. {city}. Tired always.",
        ],
        "student_young_adult": [
            f"{title} @ {work} | {city}",
            f"student | {city.lower()} | perpetually tired",
            f"{work} | {city} | broke but vibing",
        ],
        "creative_artist": [
            f"{title} | {city} | commissions {rng.pick(['open', 'closed', 'DM for info'])}",
            f"freelance {title.lower()} | {city} based | coffee dependent",
            f"{title}. {city}. Making things.",
        ],
        "tech_engineering": [
            f"{title} @ {work} | {city} | {pet.name}'s human",
            f"{title}. {city}. Debugger of code and life.",
            f"{title} | {city} based | mechanical keyboard enthusiast",
        ],
        "healthcare_worker": [
            f"{title} | {city} | {work}",
            f"{title}. {city}. Saving lives and sanity.",
            f"{title} @ {work} | {city} | {pet.species} {parent_word}",
        ],
        "local_community": [
            f"{title} | Proud {city} resident | Community advocate",
            f"{city} local | {title} | Supporting our community",
            f"Born and raised {city} | {title}",
        ],
        "opinionated_commentator": [
            f"{title} | {city} | Opinions my own and often strong",
            f"{title}. {city}. Thoughts on politics, policy, life.",
            f"{title} | {city} | Saying what others won't",
        ],
        "quiet_low_activity": [
            f"{title} | {city}",
            f"{city} based {title}",
            f"{title}. {city}.",
        ],
    }
    return rng.pick(templates[archetype])


def fancy_text(text: str) -> str:
    """Map a-z onto Mathematical Bold Italic small letters."""
    return "".join(
        chr(0x1D482 + ord(c) - ord("a")) if "a" <= c <= "z" else c
        for c in text.lower()
    )


def _display_name_for(
    archetype: Archetype, first: str, last: str, names: NameSource, rng: SeededRandom
) -> str:
    low = first.lower()
    if archetype in ("corporate_professional", "healthcare_worker", "local_community"):
        options = [f"{first} {last}", f"{first} {last[0]}.", first]
    elif archetype == "internet_native":
        options = [
            fancy_text(low),
            f"✨{low}✨",
            f"★ {low} ★",
            f"~ {low} ~",
            f"xX_{low}_Xx",
            f"{low}{rng.int(100, 9999)}",
            f"{low}.{names.pick_word('noun')}",
            f"{low} {rng.pick(['💫', '🌙', '✨', '🦋', '🌸', '💎'])}",
            low,
        ]
    elif archetype == "creative_artist":
        options = [
            f"★ {first} ★",
            f"♡ {low} ♡",
            f"{first} {rng.pick(['🎨', '✨', '🌙', '☆'])}",
            f"{low} | {rng.pick(['artist', 'creative', 'designer'])}",
            fancy_text(first),
            first,
        ]
    elif archetype == "tech_engineering":
        options = [
            f"{low}_{rng.pick(['dev', 'codes', 'builds'])}",
            f"{low}{rng.int(10, 99)}",
            f"{first} | {rng.pick(['Developer', 'Engineer', 'Tech'])}",
            first,
        ]
    elif archetype == "student_young_adult":
        options = [f"{first} {rng.pick(['🎓', '📚', '✌️', '💙', '✨'])}", low, f"{first}.", first]
    elif archetype == "parent_family":
        options = [
            f"{first} {last}",
            f"{first} | {rng.pick(['Mom', 'Dad', 'Parent'])}",
            f"{rng.pick(['Mom', 'Dad'])} of {rng.int(1, 4)}",
            first,
        ]
    elif archetype == "casual_adult":
        options = [f"{first} {last}", f"{first} {rng.pick(['💙', '❤️', '✨'])}", first, f"{first} {last[0]}."]
    elif archetype == "hobby_enthusiast":
        options = [
            f"{first} {rng.pick(['📷', '🎮', '🎨', '🏃', '🎸', '📖', '🌱', '🍳'])}",
            f"{first} | {rng.pick(['Photography', 'Gamer', 'Artist', 'Runner'])}",
            first,
            f"{first} {last}",
        ]
    elif archetype == "opinionated_commentator":
        options = [
            first.upper(),
            f"THE {first.upper()}",
            f"Real Talk {first}",
            f"{first} {last}",
            f"{first} | {rng.pick(['Truth Seeker', 'Unfiltered', 'Real One'])}",
        ]
    else:
        options = [low, first]
    return rng.pick(options)


# ── Synthesis ────────────────────────────────────────────────────────────────

def _friend(names: NameSource, rng: SeededRandom, relationships: list[str]) -> Friend:
    name = names.pick_name("first")
    word = names.pick_word(rng.pick(("noun", "adjective")))
    handle = rng.pick([
        f"{name.lower()}_{word.lower()}",
        f"{word.lower()}{name.lower()}{rng.int(1, 99)}",
        f"the{name.lower()}",
        f"{name.lower()}.{word.lower()}",
    ])
    return Friend(handle=f"@{handle}", name=name, relationship=rng.pick(relationships))


def synthesize_persona(
    seed: int,
    *,
    source: Optional[NameSource] = None,
    reference_year: int = DEFAULT_REFERENCE_YEAR,
) -> Persona:
    """Build the complete persona for ``seed``.

    The archetype is drawn first and the pet's adoption year and species
    right after it, so they never depend on archetype-specific tables.
    """
    year = reference_year
    rng = SeededRandom(seed + PERSONA_SEED_OFFSET)
    names = (source or PoolNameSource()).seed(seed)

    archetype: Archetype = rng.pick(ARCHETYPES)
    adoption_year = rng.int(*ADOPTION_YEARS)
    species = rng.pick(("dog", "cat"))

    first = names.pick_name("first")
    last = names.pick_name("last")
    pet = Pet(
        name=names.pick_name("pet"),
        species=species,
        adoption_year=adoption_year,
        personality=rng.pick(_PET_PERSONALITIES),
        fun_fact=rng.pick(_PET_FUN_FACTS),
    )
    city = names.pick_city()

    age = rng.int(*_AGE_RANGES.get(archetype, _DEFAULT_AGE_RANGE))

    title, workplace, likes, dislikes = rng.pick(_OCCUPATIONS[archetype])
    company = f"{names.pick_name('last')} {rng.pick(_COMPANY_SUFFIXES)}"
    occupation = Occupation(
        title=title,
        workplace=workplace.format(company=company, city=city),
        years_in_role=rng.int(1, 10),
        likes=likes,
        dislikes=dislikes,
    )

    interests = [
        Interest(name=hobby, level=rng.pick(_INTEREST_LEVELS), since=rng.pick(_INTEREST_SINCE))
        for hobby in rng.picks(_HOBBIES, rng.int(2, 4))
    ]

    voice = _voice_for(archetype, rng)

    events = []
    for _ in range(3):
        description, emotion, ongoing = rng.pick(_EVENTS)
        events.append(LifeEvent(days_ago=rng.int(1, 60), description=description,
                                emotion=emotion, still_affecting=ongoing))
    events.sort(key=lambda e: e.days_ago)

    friends = [_friend(names, rng, rels) for rels in _FRIEND_RELATIONSHIPS]

    return Persona(
        seed=seed,
        reference_year=year,
        archetype=archetype,
        first_name=first,
        last_name=last,
        display_name=_display_name_for(archetype, first, last, names, rng),
        age=age,
        birth_year=year - age,
        occupation=occupation,
        city=city,
        bio=_bio_for(archetype, occupation, city, pet, rng),
        lifestyle=Lifestyle(
            housing=rng.pick(_HOUSING),
            neighborhood=rng.pick(_NEIGHBORHOODS),
            commute=rng.pick(_COMMUTES),
            wake_time=rng.pick(_WAKE_TIMES),
            sleep_time=rng.pick(_SLEEP_TIMES),
            beverage=rng.pick(_BEVERAGES),
            meal_pattern=rng.pick(_MEALS),
        ),
        traits=rng.picks(_TRAITS, 3),
        interests=interests,
        pet_peeves=rng.picks(_PET_PEEVES, 3),
        quirks=rng.picks(_QUIRKS, 2),
        relationship_status=rng.pick(_RELATIONSHIPS),
        social_energy=rng.pick(_SOCIAL_ENERGY),
        friends=friends,
        voice=voice,
        recent_events=events,
        current_struggles=rng.picks(_STRUGGLES, 2),
        current_joys=rng.picks(_JOYS, 1),
        pet=pet,
    )
