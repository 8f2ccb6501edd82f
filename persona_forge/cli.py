import json
import os
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markdown import Markdown
from dotenv import load_dotenv

from persona_forge.models import DIFFICULTIES, PlayerProgress

load_dotenv()
app = typer.Typer()
console = Console()


@app.command()
def generate(
    difficulty: str = typer.Option("easy", "--difficulty", "-d", help="easy, medium or hard"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Fixed seed for a reproducible profile"),
    reveal: bool = typer.Option(False, "--reveal", help="Include the password and clues"),
    as_json: bool = typer.Option(False, "--json", help="Print the profile as JSON instead of Markdown"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save to file instead of printing"),
):
    """Generate one persona puzzle."""
    if difficulty not in DIFFICULTIES:
        console.print(f"[bold red]Error:[/] --difficulty must be one of {', '.join(DIFFICULTIES)}, got '{difficulty}'")
        raise typer.Exit(1)

    from persona_forge.generators.assembler import generate_profile
    from persona_forge.generators.sources import make_source
    from persona_forge.utils.clock import reference_year
    try:
        source = make_source(os.getenv("PERSONA_FORGE_NAME_SOURCE", "pool"))
        year = reference_year()
    except ValueError as e:
        console.print(f"[bold red]Error:[/] {e}")
        raise typer.Exit(1)

    profile = generate_profile(difficulty, seed, source=source, reference_year=year)

    if as_json:
        data = profile.model_dump() if reveal else profile.public_view()
        text = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        from persona_forge.formatters.markdown import format_profile_report
        text = format_profile_report(profile, reveal=reveal)

    if output:
        output.write_text(text, encoding="utf-8")
        console.print(f"[bold green]✓[/] Profile saved to [cyan]{output}[/] (seed {profile.seed})")
    elif as_json:
        console.print_json(text)
    else:
        console.print(Markdown(text))


@app.command()
def score(
    time_taken: float = typer.Argument(help="Seconds taken to crack the digest"),
    correct: int = typer.Argument(0, help="Correct deletions"),
    incorrect: int = typer.Argument(0, help="Incorrect deletions"),
):
    """Score a finished round."""
    if time_taken < 0 or correct < 0 or incorrect < 0:
        console.print("[bold red]Error:[/] time and deletion counts must be non-negative")
        raise typer.Exit(1)

    from persona_forge.scoring.leveling import calculate_round_score
    from persona_forge.formatters.markdown import format_round_report
    result = calculate_round_score(time_taken, correct, incorrect)
    console.print(Markdown(format_round_report(result)))


@app.command()
def level(
    total_xp: int = typer.Argument(help="Lifetime XP earned so far"),
    add: int = typer.Option(0, "--add", "-a", help="XP earned this round"),
):
    """Show the level for a lifetime XP total, optionally after adding XP."""
    if total_xp < 0 or add < 0:
        console.print("[bold red]Error:[/] XP values must be non-negative")
        raise typer.Exit(1)

    from persona_forge.scoring.leveling import add_xp, level_from_xp, total_xp_for_level, xp_for_level, xp_progress
    current_level = level_from_xp(total_xp)
    progress = PlayerProgress(
        level=current_level, xp=total_xp - total_xp_for_level(current_level), total_xp=total_xp
    )
    result = add_xp(progress, add)
    new = result.new_progress

    if result.leveled_up:
        console.print(f"[bold yellow]Level up![/] {result.old_level} → {result.new_level}")
    console.print(
        f"Level [bold]{new.level}[/] · {new.xp}/{xp_for_level(new.level)} XP "
        f"({xp_progress(new.total_xp):.0%}) · lifetime {new.total_xp}"
    )


if __name__ == "__main__":
    app()
