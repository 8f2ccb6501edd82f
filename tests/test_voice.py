from persona_forge.generators.voice import (
    apply_capitalization,
    apply_punctuation,
    apply_typo,
    insert_filler,
    style,
)
from persona_forge.models import VoiceProfile
from persona_forge.utils.rng import SeededRandom


def _voice(**overrides) -> VoiceProfile:
    fields = dict(
        punctuation="normal",
        capitalization="normal",
        emoji_frequency="never",
        slang_level="none",
        typo_tendency="careful",
        sentence_length="mixed",
        recurring_phrases=[],
    )
    fields.update(overrides)
    return VoiceProfile(**fields)


def test_lowercase_overlay():
    assert apply_capitalization("Walked Luna Today", _voice(capitalization="lowercase"), SeededRandom(1)) == \
        "walked luna today"


def test_normal_capitalization_fixes_sentence_starts_and_lone_i():
    text = apply_capitalization("hello there. i think so! yes", _voice(), SeededRandom(1))
    assert text == "Hello there. I think so! Yes"


def test_minimal_punctuation_strips_periods_and_trailing_exclamation():
    voice = _voice(punctuation="minimal")
    assert apply_punctuation("Done. Really done.", voice) == "Done Really done"
    assert apply_punctuation("wow!", voice) == "wow"
    assert apply_punctuation("wait...", voice) == "wait..."


def test_excessive_punctuation_triples_terminal_mark():
    voice = _voice(punctuation="excessive")
    assert apply_punctuation("ok.", voice) == "ok..."
    assert apply_punctuation("yes!", voice) == "yes!!!"
    assert apply_punctuation("hmm...", voice) == "hmm..."


def test_typo_replaces_a_whole_word_and_keeps_case():
    assert apply_typo("I believe it", SeededRandom(1)) == "I beleive it"
    assert apply_typo("Weird day", SeededRandom(1)) == "Wierd day"
    assert apply_typo("theory time", SeededRandom(1)) == "theory time"


def test_typo_never_touches_protected_tokens():
    text = "The Weird Sisters and Luna"
    assert apply_typo(text, SeededRandom(4), protected=("The Weird Sisters and",)) == text


def test_interjection_goes_at_the_end():
    assert insert_filler("so tired.", "lol", SeededRandom(1)) == "so tired lol"


def test_discourse_marker_never_precedes_a_mention():
    for seed in range(30):
        assert insert_filler("@sam see you there!", "ngl", SeededRandom(seed)) == "@sam see you there ngl"


def test_discourse_marker_can_lead_or_trail():
    placements = {insert_filler("long day", "tbh", SeededRandom(seed)).startswith("tbh") for seed in range(50)}
    assert placements == {True, False}


def test_capitalized_phrases_become_their_own_sentence():
    assert insert_filler("Long day!", "Exhausted", SeededRandom(1)) == "Long day. Exhausted"


def test_lowercase_slang_trails_without_a_period():
    assert insert_filler("finished the puzzle.", "finally", SeededRandom(1)) == "finished the puzzle finally"
    assert insert_filler("new mug!", "love this", SeededRandom(1)) == "new mug love this"


def test_literally_can_lead_or_trail():
    placements = {
        insert_filler("best pizza in town", "literally", SeededRandom(seed)).startswith("literally")
        for seed in range(50)
    }
    assert placements == {True, False}


def test_filler_is_skipped_when_already_present():
    assert insert_filler("lol ok", "lol", SeededRandom(1)) == "lol ok"


def test_style_is_deterministic():
    voice = _voice(typo_tendency="frequent", recurring_phrases=["lol", "tbh"], capitalization="mixed")
    assert style("the weird and the wonderful.", voice, 8) == style("the weird and the wonderful.", voice, 8)


def test_style_keeps_clue_tokens():
    voice = _voice(
        punctuation="minimal",
        capitalization="lowercase",
        typo_tendency="frequent",
        recurring_phrases=["lol", "ngl", "Exhausted"],
    )
    text = "Adopted Luna in 2020 and the weird Albuquerque heat. I believe it."
    for seed in range(200):
        styled = style(text, voice, seed, protected=("Luna", "2020", "Albuquerque")).lower()
        assert "luna" in styled
        assert "2020" in styled
        assert "albuquerque" in styled


def test_careful_voices_never_get_typos():
    voice = _voice(recurring_phrases=[])
    for seed in range(200):
        assert "beleive" not in style("i believe it", voice, seed)
