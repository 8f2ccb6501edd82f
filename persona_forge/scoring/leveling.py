"""Round scoring and XP leveling."""
import math

from persona_forge.models import PlayerProgress, RoundScore, XPResult

MIN_TIME = 30
MAX_TIME = 300
MIN_POINTS = 100
MAX_POINTS = 1000

LIGHTNING_THRESHOLD = 120
SPEED_BONUS = 200

BASE_LEVEL_XP = 100
LEVEL_GROWTH = 1.5


# ── Round score ──────────────────────────────────────────────────────────────

def base_points(time_taken: float) -> int:
    """1000 points at or under 30s, falling linearly to 100 at 5 minutes."""
    if time_taken <= MIN_TIME:
        return MAX_POINTS
    if time_taken >= MAX_TIME:
        return MIN_POINTS
    ratio = (MAX_TIME - time_taken) / (MAX_TIME - MIN_TIME)
    return math.floor(MIN_POINTS + (MAX_POINTS - MIN_POINTS) * ratio)


def speed_bonus(time_taken: float) -> int:
    return SPEED_BONUS if time_taken < LIGHTNING_THRESHOLD else 0


def accuracy_multiplier(correct: int, incorrect: int) -> float:
    """Multiplier in [0, 2] from correct vs incorrect deletions.

    No correct deletions is neutral (1.0); a clean run doubles the score;
    under 50% accuracy zeroes it. Exactly 50% gives 1.0.
    """
    if correct < 0 or incorrect < 0:
        raise ValueError("deletion counts cannot be negative")
    if correct == 0:
        return 1.0
    if incorrect == 0:
        return 2.0
    accuracy = correct / (correct + incorrect)
    if accuracy < 0.5:
        return 0.0
    return 1.0 + (accuracy - 0.5) * 2


def calculate_round_score(time_taken: float, correct: int, incorrect: int) -> RoundScore:
    if time_taken < 0:
        raise ValueError("time taken cannot be negative")
    base = base_points(time_taken)
    bonus = speed_bonus(time_taken)
    multiplier = accuracy_multiplier(correct, incorrect)
    return RoundScore(
        base_points=base,
        accuracy_multiplier=multiplier,
        speed_bonus=bonus,
        final_points=math.floor((base + bonus) * multiplier),
        correct_deletions=correct,
        incorrect_deletions=incorrect,
        time_taken=time_taken,
    )


# ── Leveling ─────────────────────────────────────────────────────────────────

def xp_for_level(level: int) -> int:
    """XP needed to clear ``level`` (100, 150, 225, 337, ...)."""
    return math.floor(BASE_LEVEL_XP * LEVEL_GROWTH ** (level - 1))


def total_xp_for_level(level: int) -> int:
    """Lifetime XP at which ``level`` begins."""
    return sum(xp_for_level(i) for i in range(1, level))


def level_from_xp(total_xp: int) -> int:
    level = 1
    accumulated = 0
    while total_xp >= accumulated + xp_for_level(level):
        accumulated += xp_for_level(level)
        level += 1
    return level


def xp_progress(total_xp: int) -> float:
    """Fraction of the current level already earned, in [0, 1)."""
    level = level_from_xp(total_xp)
    return (total_xp - total_xp_for_level(level)) / xp_for_level(level)


def add_xp(progress: PlayerProgress, amount: int) -> XPResult:
    """Return the progress after earning ``amount`` XP; ``progress`` is untouched."""
    if amount < 0:
        raise ValueError("XP to add cannot be negative")
    total = progress.total_xp + amount
    level = level_from_xp(total)
    new_progress = PlayerProgress(level=level, xp=total - total_xp_for_level(level), total_xp=total)
    return XPResult(
        new_progress=new_progress,
        leveled_up=level > progress.level,
        old_level=progress.level,
        new_level=level,
    )
