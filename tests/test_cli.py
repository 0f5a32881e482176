"""
Tests for the command line interface.

Commands run with --local so no server is needed.
"""

import json
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from cli.main import cli
from cli.utils import answers_from_options, save_results
from succession_engine import assemble


FAMILY_ARGS = [
    "--successor-identified", "yes",
    "--successor-type", "family",
    "--timeframe", "under_2y",
    "--owner-age", "62",
    "--family-business", "yes",
    "--employee-count", "55",
    "--annual-revenue", "over_10m",
    "--emotional-attachment", "high",
]


class TestAnalyseCommand:
    """Tests for `analyse`."""

    def test_local_json_output(self):
        result = CliRunner().invoke(cli, ["analyse", "--local", "--format", "json", *FAMILY_ARGS])

        assert result.exit_code == 0, result.output
        body = json.loads(result.output[result.output.index("{"):])
        assert body["scenario"] == "family_succession"
        assert body["priority"] == "high"

    def test_local_table_output(self):
        result = CliRunner().invoke(cli, ["analyse", "--local", *FAMILY_ARGS])

        assert result.exit_code == 0, result.output
        assert "Familieninterne Nachfolge" in result.output
        assert "HOCH" in result.output

    def test_missing_required_answers_exit_1(self):
        result = CliRunner().invoke(cli, ["analyse", "--local", "--successor-identified", "no"])

        assert result.exit_code == 1
        assert "timeframe" in result.output

    def test_invalid_choice_is_rejected(self):
        result = CliRunner().invoke(cli, ["analyse", "--local", "--timeframe", "someday"])

        assert result.exit_code == 2

    def test_save_json(self, tmp_path):
        target = tmp_path / "analyse"

        result = CliRunner().invoke(cli, ["analyse", "--local", "--format", "json", "--save", str(target), *FAMILY_ARGS])

        assert result.exit_code == 0, result.output
        saved = json.loads((tmp_path / "analyse.json").read_text(encoding="utf-8"))
        assert saved["analysis_results"]["scenario"] == "family_succession"
        assert saved["answers"]["owner_age"] == 62


class TestWizardCommand:
    """Tests for `wizard`."""

    def test_local_wizard_skips_successor_type(self):
        answers = ["Klein", "Handwerk", "Unter 500.000 €", "8", "Ja", "Nein", "Über 5 Jahre", "55", "Niedrig", "Mittel"]

        result = CliRunner().invoke(cli, ["wizard", "--local", "--format", "json"], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Um welche Art von Nachfolger" not in result.output
        assert '"scenario": "sale"' in result.output


class TestStatsCommand:
    """Tests for `stats`."""

    def test_local_stats(self):
        result = CliRunner().invoke(cli, ["stats", "--local", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["facts"][0]["value"] == "59%"


class TestUtils:
    """Tests for CLI helpers."""

    def test_answers_from_options_drops_unset(self):
        assert answers_from_options(timeframe="2to5y", owner_age=None) == {"timeframe": "2to5y"}

    def test_save_markdown(self, tmp_path, family_input):
        results = assemble(family_input).model_dump(mode="json")

        path = save_results(results, str(tmp_path / "plan.md"))

        content = open(path, encoding="utf-8").read()
        assert content.startswith("# Nachfolge-Analyse: Familieninterne Nachfolge")
        assert "## Nächste Schritte" in content
        assert "> 'Es ist wie Familie" in content


class TestModuleImport:
    """Tests for importing the CLI as an installed package."""

    def test_import_leaves_sys_path_untouched(self):
        """The CLI resolves its sibling modules through the installed package, not a path insert."""
        code = (
            "import sys; before = list(sys.path); import cli.main; "
            "print(sys.path == before)"
        )
        completed = subprocess.run(
            [sys.executable, "-c", code],
            cwd=Path(__file__).parent.parent,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.strip() == "True"
