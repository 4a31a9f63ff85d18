import json

from click.testing import CliRunner

from strengthlab.cli import cli
from strengthlab.core.engine import EMPTY_PROMPT
from strengthlab.core.presets import PRESETS


def _run(*args, input=None):
    return CliRunner().invoke(cli, list(args), obj={}, input=input)


def test_check_json_never_echoes_the_password():
    result = _run("-o", "json", "check", "password123")

    assert result.exit_code == 0, result.output
    assert "password123" not in result.output
    payload = json.loads(result.output)
    assert payload["estimate"]["variety"] == 2
    assert payload["tier"]["label"] in ("Very weak", "Weak")
    assert payload["variety_label"] == "two types"


def test_check_prompts_when_password_is_omitted():
    result = _run("-o", "json", "check", input="\n")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output[result.output.index("{"):])
    assert payload["estimate"]["suggestion"] == EMPTY_PROMPT
    assert payload["estimate"]["meter_percent"] == 0


def test_check_console_shows_masked_password():
    result = _run("-q", "check", "password123")

    assert result.exit_code == 0, result.output
    assert "p*********3" in result.output
    assert "password123" not in result.output
    assert "Strength Meter" in result.output


def test_presets_json_lists_every_preset():
    result = _run("-o", "json", "presets")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [row["label"] for row in payload] == [p.label for p in PRESETS]


def test_tiers_json():
    result = _run("-o", "json", "tiers")

    assert result.exit_code == 0, result.output
    assert [tier["label"] for tier in json.loads(result.output)][-1] == "Excellent"


def test_interactive_stops_on_empty_entry():
    result = _run("-o", "json", "interactive", input="abc\nD0gz4Life\n\n")

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("{")]
    assert len(lines) == 2
    assert json.loads(lines[1])["estimate"]["variety"] == 3


def test_missing_config_file_is_a_usage_error(tmp_path):
    result = _run("-c", str(tmp_path / "missing.toml"), "tiers")
    assert result.exit_code == 2
