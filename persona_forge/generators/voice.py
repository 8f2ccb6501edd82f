"""Per-persona voice styling applied to every composed post."""
import re
from typing import Iterable

from persona_forge.models import VoiceProfile
from persona_forge.utils.rng import SeededRandom

TYPO_RATE = 0.12
FILLER_RATE = 0.25
MIXED_CAPITALIZE_RATE = 0.7

TYPOS = {
    "believe": "beleive",
    "realized": "ralized",
    "definitely": "defintely",
    "literally": "literaly",
    "weird": "wierd",
    "the": "teh",
    "and": "adn",
}

# Filler phrase placement: interjections trail the post, discourse markers
# may lead or trail it, other lowercase slang trails it, and capitalized
# phrases trail as their own sentence.
INTERJECTIONS = {"lol", "lmao", "fr", "rn", "omg", "ugh"}
DISCOURSE_MARKERS = {"ngl", "tbh", "honestly", "literally"}

_TYPO_RE = re.compile(r"\b(" + "|".join(TYPOS) + r")\b", re.IGNORECASE)
_SENTENCE_START_RE = re.compile(r"([.!?]\s+)([a-z])")
_LONE_I_RE = re.compile(r"\bi\b")
_PERIOD_RE = re.compile(r"(?<!\.)\.(?!\.)(?=\s|$)")


def _protected_spans(text: str, protected: Iterable[str]) -> list[tuple[int, int]]:
    spans = []
    for token in protected:
        if token:
            spans.extend(m.span() for m in re.finditer(re.escape(token), text, re.IGNORECASE))
    return spans


def apply_capitalization(text: str, voice: VoiceProfile, rng: SeededRandom) -> str:
    mode = voice.capitalization
    if mode == "lowercase":
        return text.lower()
    if mode == "normal":
        text = text[:1].upper() + text[1:]
        text = _SENTENCE_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)
        return _LONE_I_RE.sub("I", text)
    if rng.boolean(MIXED_CAPITALIZE_RATE):
        return text[:1].upper() + text[1:]
    return text


def apply_typo(text: str, rng: SeededRandom, protected: Iterable[str] = ()) -> str:
    """Misspell one whole word from TYPOS, never inside a protected token."""
    spans = _protected_spans(text, protected)
    candidates = [
        m for m in _TYPO_RE.finditer(text)
        if not any(m.start() < end and start < m.end() for start, end in spans)
    ]
    if not candidates:
        return text
    match = rng.pick(candidates)
    word = match.group(0)
    typo = TYPOS[word.lower()]
    if word[0].isupper():
        typo = typo[0].upper() + typo[1:]
    return text[:match.start()] + typo + text[match.end():]


def apply_punctuation(text: str, voice: VoiceProfile) -> str:
    if voice.punctuation == "minimal":
        text = _PERIOD_RE.sub("", text)
        return re.sub(r"(?<!!)!$", "", text)
    if voice.punctuation == "excessive":
        text = re.sub(r"(?<![.!?])\.$", "...", text)
        return re.sub(r"(?<!!)!$", "!!!", text)
    return text


def insert_filler(text: str, phrase: str, rng: SeededRandom) -> str:
    """Attach ``phrase`` to ``text``; terminal periods/exclamations go first."""
    if re.search(rf"(?<!\w){re.escape(phrase)}(?!\w)", text, re.IGNORECASE):
        return text
    body = re.sub(r"[.!]+$", "", text.rstrip())
    key = phrase.lower()
    if key in DISCOURSE_MARKERS and not body.startswith("@") and rng.boolean():
        return f"{phrase} {body}"
    if key in INTERJECTIONS or key in DISCOURSE_MARKERS or phrase[:1].islower():
        return f"{body} {phrase}"
    if body.endswith(("?", "…")):
        return f"{body} {phrase}"
    return f"{body}. {phrase}"


def style(text: str, voice: VoiceProfile, seed: int, protected: Iterable[str] = ()) -> str:
    """Apply the persona's voice to one post.

    Steps run in a fixed order: capitalization, typo, punctuation, filler.
    Only case changes ever touch the ``protected`` tokens.
    """
    protected = tuple(protected)
    rng = SeededRandom(seed)
    text = apply_capitalization(text, voice, rng)
    if voice.typo_tendency != "careful" and rng.boolean(TYPO_RATE):
        text = apply_typo(text, rng, protected)
    text = apply_punctuation(text, voice)
    if voice.recurring_phrases and rng.boolean(FILLER_RATE):
        text = insert_filler(text, rng.pick(voice.recurring_phrases), rng)
    return text
