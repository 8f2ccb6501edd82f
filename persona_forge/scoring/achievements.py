"""Achievement catalog and unlock rules driven by round telemetry."""
import time
from typing import Optional

from persona_forge.models import Achievement, AchievementCheck, AchievementDef, AchievementProgress, PlayerStats
from persona_forge.scoring.leveling import LIGHTNING_THRESHOLD

CATALOG: dict[str, AchievementDef] = {
    a.id: a
    for a in [
        AchievementDef(id="first_hash", name="Hash Hunter", description="Copy your first MD5 hash",
                       icon="📋", rarity="common"),
        AchievementDef(id="first_login", name="Access Granted",
                       description="Successfully crack and log in for the first time", icon="🔓", rarity="common"),
        AchievementDef(id="first_round", name="Social Engineer", description="Complete your first round",
                       icon="🎯", rarity="common"),
        AchievementDef(id="speed_demon", name="Speed Demon", description="Complete a round in under 2 minutes",
                       icon="⚡", rarity="rare"),
        AchievementDef(id="perfectionist", name="Perfectionist", description="Complete a round without using hints",
                       icon="✨", rarity="rare"),
        AchievementDef(id="streak_3", name="On Fire", description="Achieve a 3-round winning streak",
                       icon="🔥", rarity="rare"),
        AchievementDef(id="streak_5", name="Unstoppable", description="Achieve a 5-round winning streak",
                       icon="💫", rarity="epic"),
        AchievementDef(id="streak_10", name="Legendary", description="Achieve a 10-round winning streak",
                       icon="👑", rarity="legendary"),
        AchievementDef(id="rounds_10", name="Dedicated", description="Complete 10 rounds total",
                       icon="🎖️", rarity="common"),
        AchievementDef(id="rounds_25", name="Expert", description="Complete 25 rounds total",
                       icon="🏆", rarity="rare"),
        AchievementDef(id="rounds_50", name="Master", description="Complete 50 rounds total",
                       icon="💎", rarity="epic"),
        AchievementDef(id="rounds_100", name="Elite Hacker", description="Complete 100 rounds total",
                       icon="⭐", rarity="legendary"),
        AchievementDef(id="no_hint_streak_3", name="Sharp Mind",
                       description="Complete 3 rounds in a row without hints", icon="🧠", rarity="epic"),
    ]
}

_ROUND_TARGETS = {"first_round": 1, "rounds_10": 10, "rounds_25": 25, "rounds_50": 50, "rounds_100": 100}
_STREAK_TARGETS = {"streak_3": 3, "streak_5": 5, "streak_10": 10}


def initial_achievements() -> list[Achievement]:
    return [Achievement(id=achievement_id) for achievement_id in CATALOG]


def _earned(stats: PlayerStats) -> list[str]:
    earned = []
    if stats.hash_copied:
        earned.append("first_hash")
    if stats.logged_in:
        earned.append("first_login")
    earned += [aid for aid, target in _ROUND_TARGETS.items() if stats.rounds_completed >= target]
    earned += [aid for aid, target in _STREAK_TARGETS.items() if stats.current_streak >= target]
    if stats.completion_time is not None and stats.completion_time < LIGHTNING_THRESHOLD:
        earned.append("speed_demon")
    if not stats.used_hint and stats.rounds_completed > 0:
        earned.append("perfectionist")
    if stats.no_hint_streak >= 3:
        earned.append("no_hint_streak_3")
    return earned


def check_achievements(
    stats: PlayerStats,
    achievements: Optional[list[Achievement]] = None,
    now: Optional[float] = None,
) -> AchievementCheck:
    """Unlock everything ``stats`` qualifies for; returns a new list.

    Already-unlocked achievements keep their original timestamp.
    """
    current = achievements if achievements is not None else initial_achievements()
    by_id = {a.id: a for a in current}
    stamp = now if now is not None else time.time()
    new_unlocks = []
    for aid in _earned(stats):
        existing = by_id.get(aid)
        if existing is None or existing.unlocked:
            continue
        by_id[aid] = existing.model_copy(update={"unlocked": True, "unlocked_at": stamp})
        new_unlocks.append(aid)
    return AchievementCheck(achievements=[by_id[a.id] for a in current], new_unlocks=new_unlocks)


def achievement_progress(achievement_id: str, stats: PlayerStats) -> AchievementProgress:
    if achievement_id not in CATALOG:
        raise ValueError(f"Unknown achievement: {achievement_id!r}")
    if achievement_id == "first_hash":
        done = int(stats.hash_copied)
        return AchievementProgress(current=done, target=1, progress=float(done))
    if achievement_id == "first_login":
        done = int(stats.logged_in)
        return AchievementProgress(current=done, target=1, progress=float(done))
    if achievement_id in _ROUND_TARGETS:
        target = _ROUND_TARGETS[achievement_id]
        current = min(stats.rounds_completed, target) if target == 1 else stats.rounds_completed
        return AchievementProgress(current=current, target=target, progress=min(stats.rounds_completed / target, 1.0))
    if achievement_id in _STREAK_TARGETS:
        target = _STREAK_TARGETS[achievement_id]
        return AchievementProgress(
            current=stats.current_streak, target=target, progress=min(stats.current_streak / target, 1.0)
        )
    if achievement_id == "no_hint_streak_3":
        return AchievementProgress(
            current=stats.no_hint_streak, target=3, progress=min(stats.no_hint_streak / 3, 1.0)
        )
    return AchievementProgress(current=0, target=1, progress=0.0)
