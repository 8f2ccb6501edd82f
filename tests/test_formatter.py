from persona_forge.formatters.markdown import format_profile_report, format_round_report
from persona_forge.generators.assembler import generate_profile
from persona_forge.generators.sources import PoolNameSource
from persona_forge.scoring.leveling import calculate_round_score

PROFILE = generate_profile("easy", 42, source=PoolNameSource(), reference_year=2025)


def test_report_has_header_and_target():
    report = format_profile_report(PROFILE)
    assert report.startswith(f"# {PROFILE.profile.display_name} (@{PROFILE.profile.handle})")
    assert "## Target" in report
    assert PROFILE.digest in report
    assert "Most active on" in report


def test_report_lists_every_post():
    report = format_profile_report(PROFILE)
    assert report.count("♥") == len(PROFILE.posts)
    for post in PROFILE.posts:
        assert post.text in report


def test_report_hides_solution_unless_revealed():
    hidden = format_profile_report(PROFILE)
    assert "## Solution" not in hidden
    assert "luna2020" not in hidden

    revealed = format_profile_report(PROFILE, reveal=True)
    assert "## Solution" in revealed
    assert "`luna2020`" in revealed
    assert "- Pet: Luna (dog)" in revealed


def test_round_report_table():
    report = format_round_report(calculate_round_score(165, 3, 1))
    assert "| Base points | 550 |" in report
    assert "| Accuracy multiplier | ×1.50 |" in report
    assert "| **Final** | **825** |" in report
    assert "3 correct / 1 incorrect" in report
