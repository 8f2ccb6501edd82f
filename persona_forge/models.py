from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Archetype = Literal[
    "corporate_professional",
    "casual_adult",
    "internet_native",
    "hobby_enthusiast",
    "parent_family",
    "student_young_adult",
    "creative_artist",
    "tech_engineering",
    "healthcare_worker",
    "local_community",
    "opinionated_commentator",
    "quiet_low_activity",
]
ARCHETYPES: tuple[Archetype, ...] = (
    "corporate_professional",
    "casual_adult",
    "internet_native",
    "hobby_enthusiast",
    "parent_family",
    "student_young_adult",
    "creative_artist",
    "tech_engineering",
    "healthcare_worker",
    "local_community",
    "opinionated_commentator",
    "quiet_low_activity",
)

Difficulty = Literal["easy", "medium", "hard"]
DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Persona ──────────────────────────────────────────────────────────────────

class Occupation(_Frozen):
    title: str
    workplace: str
    years_in_role: int
    likes: list[str] = []
    dislikes: list[str] = []


class Lifestyle(_Frozen):
    housing: str
    neighborhood: str
    commute: str
    wake_time: str
    sleep_time: str
    beverage: str
    meal_pattern: str


class Interest(_Frozen):
    name: str
    level: Literal["casual", "serious", "obsessed"]
    since: str


class Friend(_Frozen):
    handle: str          # includes the leading "@"
    name: str
    relationship: str


class VoiceProfile(_Frozen):
    punctuation: Literal["minimal", "normal", "excessive"]
    capitalization: Literal["lowercase", "normal", "mixed"]
    emoji_frequency: Literal["never", "rare", "occasional", "frequent"]
    slang_level: Literal["none", "some", "heavy"]
    typo_tendency: Literal["careful", "occasional", "frequent"]
    sentence_length: Literal["short", "mixed", "rambling"]
    recurring_phrases: list[str] = []


class LifeEvent(_Frozen):
    days_ago: int
    description: str
    emotion: str
    still_affecting: bool


class Pet(_Frozen):
    name: str
    species: Literal["dog", "cat"]
    adoption_year: int
    personality: str
    fun_fact: str


class Persona(_Frozen):
    seed: int
    reference_year: int
    archetype: Archetype
    first_name: str
    last_name: str
    display_name: str
    age: int
    birth_year: int
    occupation: Occupation
    city: str
    bio: str
    lifestyle: Lifestyle
    traits: list[str]
    interests: list[Interest]
    pet_peeves: list[str]
    quirks: list[str]
    relationship_status: str
    social_energy: Literal["introvert", "extrovert", "ambivert"]
    friends: list[Friend]
    voice: VoiceProfile
    recent_events: list[LifeEvent]
    current_struggles: list[str]
    current_joys: list[str]
    pet: Pet

    def clue_tokens(self) -> tuple[str, ...]:
        """Literal values every post set must expose somewhere."""
        return (self.pet.name, str(self.pet.adoption_year), self.city)


# ── Generated profile ────────────────────────────────────────────────────────

class Post(_Frozen):
    id: str
    text: str
    date: str            # ISO date, YYYY-MM-DD
    likes: int
    reposts: int
    replies: int
    media: Optional[str] = None


class PublicProfile(_Frozen):
    handle: str
    display_name: str
    bio: str
    location: str
    website: str
    joined: str          # "Joined March 2021"
    following: int
    followers: int
    avatar_url: str
    cover_url: str


class PasswordBinding(_Frozen):
    pattern: str
    password: str
    digest: str
    components: list[str] = []
    clues: list[str] = []


class GeneratedProfile(_Frozen):
    seed: int
    difficulty: Difficulty
    persona: Persona
    profile: PublicProfile
    posts: list[Post]
    password: str
    digest: str
    clues: list[str]
    completion_time: Optional[float] = None

    def with_completion_time(self, seconds: float) -> "GeneratedProfile":
        if self.completion_time is not None:
            raise ValueError("completion time already recorded for this profile")
        if seconds < 0:
            raise ValueError("completion time cannot be negative")
        return self.model_copy(update={"completion_time": seconds})

    def public_view(self) -> dict:
        """Serializable puzzle view: no password, clues or underlying persona."""
        return self.model_dump(exclude={"password", "clues", "persona"})


# ── Scoring ──────────────────────────────────────────────────────────────────

class PlayerProgress(_Frozen):
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)        # progress inside the current level
    total_xp: int = Field(default=0, ge=0)


class RoundScore(_Frozen):
    base_points: int
    accuracy_multiplier: float
    speed_bonus: int
    final_points: int
    correct_deletions: int
    incorrect_deletions: int
    time_taken: float


class XPResult(_Frozen):
    new_progress: PlayerProgress
    leveled_up: bool
    old_level: int
    new_level: int


# ── Achievements ─────────────────────────────────────────────────────────────

Rarity = Literal["common", "rare", "epic", "legendary"]


class AchievementDef(_Frozen):
    id: str
    name: str
    description: str
    icon: str
    rarity: Rarity


class Achievement(_Frozen):
    id: str
    unlocked: bool = False
    unlocked_at: Optional[float] = None   # unix seconds


class PlayerStats(_Frozen):
    rounds_completed: int = Field(default=0, ge=0)
    current_streak: int = Field(default=0, ge=0)
    no_hint_streak: int = Field(default=0, ge=0)
    hash_copied: bool = False
    logged_in: bool = False
    used_hint: bool = False
    completion_time: Optional[float] = None


class AchievementCheck(_Frozen):
    achievements: list[Achievement]
    new_unlocks: list[str] = []


class AchievementProgress(_Frozen):
    current: int
    target: int
    progress: float
