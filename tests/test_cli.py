# tests/test_cli.py

from __future__ import annotations

from typer.testing import CliRunner

from family_tree.cli import app
from family_tree.cli import utils as cli_utils
from family_tree.config import get_config
from family_tree.utils import mock_file_path

runner = CliRunner()


def test_show_prints_rendered_tree() -> None:
    result = runner.invoke(app, ["show", str(mock_file_path("simple.txt"))])

    assert result.exit_code == 0, result.output
    assert "Family Tree:" in result.output
    assert "A\n  B\n    D\n    E\n  C\n    F\n" in result.output


def test_mrca_with_names() -> None:
    result = runner.invoke(
        app, ["mrca", str(mock_file_path("simple.txt")), "D", "E", "--quiet"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Most recent common ancestor of D and E is B"


def test_mrca_defaults_to_bilbo_and_frodo() -> None:
    result = runner.invoke(app, ["mrca", str(mock_file_path("hobbits.txt"))])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Tree:\nFamily Tree:")
    assert "Most recent common ancestor of Bilbo and Frodo is Balbo" in result.output


def test_mrca_requires_both_names_or_neither() -> None:
    result = runner.invoke(app, ["mrca", str(mock_file_path("simple.txt")), "D"])
    assert result.exit_code == 2


def test_mrca_unknown_name_reports_input_file_trouble() -> None:
    result = runner.invoke(
        app, ["mrca", str(mock_file_path("simple.txt")), "D", "Gollum"]
    )

    assert result.exit_code == 1
    assert "Input file trouble:" in result.output
    assert "Gollum" in result.output


def test_missing_file_reports_io_trouble(tmp_path) -> None:
    result = runner.invoke(app, ["show", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "IO trouble:" in result.output


def test_malformed_file_reports_input_file_trouble() -> None:
    result = runner.invoke(app, ["show", str(mock_file_path("malformed.txt"))])

    assert result.exit_code == 1
    assert "Input file trouble:" in result.output
    assert "XYZ" in result.output


def test_ancestors_lists_nearest_first() -> None:
    result = runner.invoke(
        app, ["ancestors", str(mock_file_path("hobbits.txt")), "Frodo"]
    )

    assert result.exit_code == 0, result.output
    assert "Ancestors of Frodo: Drogo -> Fosco -> Largo -> Balbo" in result.output


def test_ancestors_of_root() -> None:
    result = runner.invoke(app, ["ancestors", str(mock_file_path("simple.txt")), "A"])

    assert result.exit_code == 0, result.output
    assert "A has no ancestors in this tree" in result.output


def test_stats_table() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("simple.txt"))])

    assert result.exit_code == 0, result.output
    assert "Family Tree Statistics" in result.output
    assert "People" in result.output
    assert "6" in result.output


def test_show_without_file_prompts_for_choice(tmp_path, monkeypatch) -> None:
    (tmp_path / "a.txt").write_text("X:Y\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("P:Q,R\n", encoding="utf-8")
    monkeypatch.setattr(cli_utils, "default_data_dir", lambda: tmp_path)

    result = runner.invoke(app, ["show"], input="2\n")

    assert result.exit_code == 0, result.output
    assert "1. a.txt" in result.output
    assert "2. b.txt" in result.output
    assert "P\n  Q\n  R\n" in result.output


def test_show_without_file_and_no_candidates(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(cli_utils, "default_data_dir", lambda: tmp_path)

    result = runner.invoke(app, ["show"])

    assert result.exit_code == 1
    assert "No family tree text files found" in result.output


def test_mrca_with_bad_default_names_reports_configuration_trouble(monkeypatch) -> None:
    monkeypatch.setitem(get_config().query, "default_names", ["Bilbo"])

    result = runner.invoke(app, ["mrca", str(mock_file_path("hobbits.txt"))])

    assert result.exit_code == 1
    assert "Configuration trouble:" in result.output
    assert "Traceback" not in result.output
