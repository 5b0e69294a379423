"""Tests for the click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from franchises.infrastructure.bootstrap import DATA_DIR_ENV
from franchises.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


def _stored(tmp_path) -> list[dict]:
    return json.loads((tmp_path / "franchises.json").read_text())


class TestCli:

    def test_build_franchise_and_query_top_stock(self, runner, tmp_path):
        result = runner.invoke(cli, ["franchise", "add", "--name", "Nequi"])
        assert result.exit_code == 0, result.output
        franchise_id = _stored(tmp_path)[0]["id"]

        result = runner.invoke(
            cli, ["branch", "add", "--franchise", franchise_id, "--name", "Centro"]
        )
        assert result.exit_code == 0, result.output
        branch_id = _stored(tmp_path)[0]["branches"][0]["id"]

        for name, stock in (("Pan", "10"), ("Leche", "30")):
            result = runner.invoke(cli, [
                "product", "add", "--franchise", franchise_id,
                "--branch", branch_id, "--name", name, "--stock", stock,
            ])
            assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["franchise", "top-stock", "--id", franchise_id])
        assert result.exit_code == 0, result.output
        assert "Centro" in result.output
        assert "Leche" in result.output
        assert "Pan" not in result.output

    def test_update_stock_and_delete(self, runner, tmp_path):
        runner.invoke(cli, ["franchise", "add", "--name", "Nequi"])
        franchise_id = _stored(tmp_path)[0]["id"]
        runner.invoke(cli, ["branch", "add", "--franchise", franchise_id, "--name", "Centro"])
        branch_id = _stored(tmp_path)[0]["branches"][0]["id"]
        runner.invoke(cli, [
            "product", "add", "--franchise", franchise_id,
            "--branch", branch_id, "--name", "Pan",
        ])
        product_id = _stored(tmp_path)[0]["branches"][0]["products"][0]["id"]

        result = runner.invoke(cli, [
            "product", "stock", "--franchise", franchise_id,
            "--branch", branch_id, "--id", product_id, "--stock", "7",
        ])
        assert result.exit_code == 0, result.output
        assert "stock set to 7" in result.output

        result = runner.invoke(cli, [
            "product", "delete", "--franchise", franchise_id,
            "--branch", branch_id, "--id", product_id,
        ])
        assert result.exit_code == 0, result.output
        assert _stored(tmp_path)[0]["branches"][0]["products"] == []

    def test_rename_commands(self, runner, tmp_path):
        runner.invoke(cli, ["franchise", "add", "--name", "Nequi"])
        franchise_id = _stored(tmp_path)[0]["id"]

        result = runner.invoke(
            cli, ["franchise", "rename", "--id", franchise_id, "--name", "Daviplata"]
        )
        assert result.exit_code == 0, result.output
        assert _stored(tmp_path)[0]["name"] == "Daviplata"

        runner.invoke(cli, ["branch", "add", "--franchise", franchise_id, "--name", "Centro"])
        branch_id = _stored(tmp_path)[0]["branches"][0]["id"]
        result = runner.invoke(cli, [
            "branch", "rename", "--franchise", franchise_id,
            "--id", branch_id, "--name", "Norte",
        ])
        assert result.exit_code == 0, result.output
        assert _stored(tmp_path)[0]["branches"][0]["name"] == "Norte"

    def test_show_and_list(self, runner, tmp_path):
        result = runner.invoke(cli, ["franchise", "list"])
        assert "No franchises found." in result.output

        runner.invoke(cli, ["franchise", "add", "--name", "Nequi"])
        franchise_id = _stored(tmp_path)[0]["id"]

        result = runner.invoke(cli, ["franchise", "list"])
        assert franchise_id in result.output

        result = runner.invoke(cli, ["franchise", "show", "--id", franchise_id])
        assert result.exit_code == 0, result.output
        assert "'Nequi'" in result.output
        assert "(no branches)" in result.output

    def test_negative_stock_update_fails(self, runner, tmp_path):
        runner.invoke(cli, ["franchise", "add", "--name", "Nequi"])
        franchise_id = _stored(tmp_path)[0]["id"]
        result = runner.invoke(cli, [
            "product", "stock", "--franchise", franchise_id,
            "--branch", "b", "--id", "p", "--stock=-5",
        ])
        assert result.exit_code == 1
        assert "zero or greater" in result.output

    def test_unknown_franchise_reports_not_found(self, runner):
        result = runner.invoke(cli, ["franchise", "show", "--id", "ghost"])
        assert result.exit_code == 1
        assert "Franchise not found: ghost" in result.output

    def test_blank_name_reports_validation_error(self, runner):
        result = runner.invoke(cli, ["franchise", "add", "--name", "   "])
        assert result.exit_code == 1
        assert "Franchise name is required" in result.output
