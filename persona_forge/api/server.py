"""FastAPI server exposing persona puzzles, round scoring and XP progress."""
import logging
import os

from dotenv import load_dotenv

load_dotenv()
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from persona_forge.generators.assembler import generate_profile
from persona_forge.generators.password import md5_hex
from persona_forge.generators.sources import make_source
from persona_forge.models import (
    Achievement,
    AchievementCheck,
    AchievementProgress,
    Difficulty,
    PlayerProgress,
    PlayerStats,
    RoundScore,
    XPResult,
)
from persona_forge.scoring.achievements import achievement_progress, check_achievements
from persona_forge.scoring.leveling import add_xp, calculate_round_score
from persona_forge.utils.clock import reference_year

_log = logging.getLogger(__name__)

app = FastAPI(title="persona-forge API")

_origins = os.getenv("PERSONA_FORGE_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _origins.split(",") if o.strip()],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ── Requests ─────────────────────────────────────────────────────────────────

class ProfileRequest(BaseModel):
    difficulty: Difficulty = "easy"
    seed: Optional[int] = None


class VerifyRequest(BaseModel):
    seed: int
    difficulty: Difficulty = "easy"
    guess: str = Field(max_length=128)


class ScoreRequest(BaseModel):
    time_taken: float = Field(ge=0)
    correct_deletions: int = Field(default=0, ge=0)
    incorrect_deletions: int = Field(default=0, ge=0)


class XPRequest(BaseModel):
    progress: PlayerProgress = PlayerProgress()
    amount: int = Field(ge=0)


class AchievementRequest(BaseModel):
    stats: PlayerStats
    achievements: Optional[list[Achievement]] = None


class ProgressRequest(BaseModel):
    achievement_id: str
    stats: PlayerStats


def _generate(difficulty: str, seed: Optional[int]):
    try:
        source = make_source(os.getenv("PERSONA_FORGE_NAME_SOURCE", "pool"))
        return generate_profile(difficulty, seed, source=source, reference_year=reference_year())
    except ValueError as e:
        _log.warning("profile generation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


# ── Endpoints ────────────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    """Check that the configured reference year is usable."""
    try:
        year = reference_year()
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"status": "ok", "reference_year": year}


@app.post("/api/profiles")
def create_profile(req: ProfileRequest):
    """Generate a puzzle. The plaintext password never leaves the server."""
    return _generate(req.difficulty, req.seed).public_view()


@app.post("/api/profiles/verify")
def verify_guess(req: VerifyRequest):
    """Regenerate the round from its seed and compare the guess by digest."""
    profile = _generate(req.difficulty, req.seed)
    correct = md5_hex(req.guess) == profile.digest
    return {"correct": correct, "clues": profile.clues if correct else []}


@app.post("/api/rounds/score", response_model=RoundScore)
def score_round(req: ScoreRequest):
    return calculate_round_score(req.time_taken, req.correct_deletions, req.incorrect_deletions)


@app.post("/api/progress/xp", response_model=XPResult)
def earn_xp(req: XPRequest):
    return add_xp(req.progress, req.amount)


@app.post("/api/achievements/check", response_model=AchievementCheck)
def achievements(req: AchievementRequest):
    return check_achievements(req.stats, req.achievements)


@app.post("/api/achievements/progress", response_model=AchievementProgress)
def progress(req: ProgressRequest):
    try:
        return achievement_progress(req.achievement_id, req.stats)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
