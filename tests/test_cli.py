import json
import os
from unittest.mock import patch

from typer.testing import CliRunner

from persona_forge.cli import app

runner = CliRunner()

ENV = {"PERSONA_FORGE_REFERENCE_YEAR": "2025", "PERSONA_FORGE_NAME_SOURCE": "pool"}


def test_generate_json_to_file_hides_password(tmp_path):
    out = tmp_path / "profile.json"
    with patch.dict(os.environ, ENV):
        result = runner.invoke(app, ["generate", "--seed", "42", "--json", "--output", str(out)])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["digest"] == "b59c67bf196a4758191e42f76670ceba"
    assert "password" not in data
    assert len(data["posts"]) >= 12


def test_generate_reveal_markdown_to_file(tmp_path):
    out = tmp_path / "profile.md"
    with patch.dict(os.environ, ENV):
        result = runner.invoke(app, ["generate", "-s", "42", "--reveal", "-o", str(out)])
    assert result.exit_code == 0
    assert "luna2020" in out.read_text(encoding="utf-8")


def test_generate_rejects_unknown_difficulty():
    result = runner.invoke(app, ["generate", "--difficulty", "impossible"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_score_prints_final_points():
    result = runner.invoke(app, ["score", "165", "3", "1"])
    assert result.exit_code == 0
    assert "825" in result.output


def test_score_rejects_negative_counts():
    result = runner.invoke(app, ["score", "60", "--", "-1"])
    assert result.exit_code != 0


def test_level_up_message():
    result = runner.invoke(app, ["level", "0", "--add", "120"])
    assert result.exit_code == 0
    assert "Level up!" in result.output
    assert "20/150 XP" in result.output


def test_level_without_adding():
    result = runner.invoke(app, ["level", "250"])
    assert result.exit_code == 0
    assert "Level up!" not in result.output
    assert "0/225 XP" in result.output


def test_generate_rejects_unknown_name_source():
    with patch.dict(os.environ, {"PERSONA_FORGE_NAME_SOURCE": "phonebook"}):
        result = runner.invoke(app, ["generate", "--seed", "42"])
    assert result.exit_code == 1
    assert "Error" in result.output
