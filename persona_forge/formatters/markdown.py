from persona_forge.models import GeneratedProfile, RoundScore
from persona_forge.utils.patterns import compute_posting_patterns


def format_profile_report(profile: GeneratedProfile, reveal: bool = False) -> str:
    """Format a generated profile into a Markdown puzzle sheet."""
    p = profile.profile
    persona = profile.persona
    patterns = compute_posting_patterns(profile.posts)
    peak_days = patterns["peak_days"]
    top_day = max(peak_days, key=peak_days.get) if peak_days else "N/A"

    sections = [f"# {p.display_name} (@{p.handle})\n"]
    sections.append(f"> {p.bio}\n")
    sections.append(f"- **Location**: {p.location}")
    sections.append(f"- **Website**: {p.website}")
    sections.append(f"- **{p.joined}** · {p.following} following · {p.followers} followers")
    sections.append(f"- **Most active on**: {top_day}")
    sections.append("")

    sections.append("## Target\n")
    sections.append(f"- **Difficulty**: {profile.difficulty}")
    sections.append(f"- **MD5**: `{profile.digest}`")
    sections.append(f"- **Seed**: {profile.seed}")
    sections.append("")

    sections.append("## Posts\n")
    for post in profile.posts:
        sections.append(f"**{post.date}** · ♥ {post.likes} · ↻ {post.reposts} · 💬 {post.replies}\n")
        sections.append(post.text + "\n")
        if post.media:
            sections.append(f"![media]({post.media})\n")

    if reveal:
        sections.append("## Solution\n")
        sections.append(f"- **Password**: `{profile.password}`")
        sections.append(f"- **Archetype**: {persona.archetype}")
        for clue in profile.clues:
            sections.append(f"- {clue}")
        sections.append("")

    return "\n".join(sections)


def format_round_report(score: RoundScore) -> str:
    return "\n".join([
        "## Round Score\n",
        "| Component | Value |",
        "|---|---|",
        f"| Time taken | {score.time_taken:g}s |",
        f"| Base points | {score.base_points} |",
        f"| Speed bonus | {score.speed_bonus} |",
        f"| Accuracy multiplier | ×{score.accuracy_multiplier:.2f} |",
        f"| Deletions | {score.correct_deletions} correct / {score.incorrect_deletions} incorrect |",
        f"| **Final** | **{score.final_points}** |",
        "",
    ])
