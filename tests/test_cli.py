"""Tests for the Typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from nimbra_connect.cli import app

runner = CliRunner()


@pytest.fixture()
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "host.json"
    path.write_text(
        json.dumps(
            {
                "elements": [
                    {
                        "name": "Edge1",
                        "tables": {"10002": ["PortA"], "15002": ["PortB"]},
                    },
                    {"name": "Edge2", "active": False},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


class TestConnectCommand:
    def test_success(self, snapshot_file: Path) -> None:
        result = runner.invoke(
            app,
            ["connect", "--snapshot", str(snapshot_file), "-e", "Edge1", "-i", '["PortA"]', "-o", "PortB"],
        )
        assert result.exit_code == 0, result.output
        assert "Wrote Edge1/15059: (PortB, PortA)" in result.output

    def test_validation_failure(self, snapshot_file: Path) -> None:
        result = runner.invoke(
            app,
            ["connect", "--snapshot", str(snapshot_file), "-e", "Edge1", "-i", "PortA", "-o", "Unknown"],
        )
        assert result.exit_code == 1
        assert "Outputs" in result.output

    def test_abort_policy(self, snapshot_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "connect", "--snapshot", str(snapshot_file), "-e", "Edge2",
                "-i", "PortA", "-o", "PortB", "--policy", "abort",
            ],
        )
        assert result.exit_code == 1
        assert "Script aborted" in result.output

    def test_log_policy(self, snapshot_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "connect", "--snapshot", str(snapshot_file), "-e", "Edge1",
                "-i", "Nope", "-o", "PortB", "--policy", "log",
            ],
        )
        assert result.exit_code == 1
        assert "Connect failed" in result.output
        assert "Wrote" not in result.output

    def test_unknown_policy(self, snapshot_file: Path) -> None:
        result = runner.invoke(
            app,
            ["connect", "--snapshot", str(snapshot_file), "-i", "a", "-o", "b", "--policy", "maybe"],
        )
        assert result.exit_code == 2


class TestOtherCommands:
    def test_connectors(self) -> None:
        result = runner.invoke(app, ["connectors"])
        assert result.exit_code == 0
        assert "connect_input" in result.output
        assert "connect_input_bound" in result.output

    def test_audit_after_connect(self, snapshot_file: Path) -> None:
        runner.invoke(
            app,
            ["connect", "--snapshot", str(snapshot_file), "-e", "Edge1", "-i", "PortA", "-o", "PortB"],
        )
        runner.invoke(
            app,
            ["connect", "--snapshot", str(snapshot_file), "-e", "Edge1", "-i", "PortA", "-o", "Nope"],
        )

        verified = runner.invoke(app, ["audit", "--verify"])
        assert verified.exit_code == 0
        assert "intact, 2 record(s) checked" in verified.output

        listed = runner.invoke(app, ["audit"])
        assert "connected  Edge1: PortA -> PortB" in listed.output

        failed = runner.invoke(app, ["audit", "--failed"])
        assert "Edge1: PortA -> Nope" in failed.output
        assert "PortB" not in failed.output

    def test_audit_empty(self) -> None:
        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 0
        assert "No connects recorded." in result.output


class TestInvalidSnapshot:
    @pytest.mark.parametrize(
        "content",
        ["{not json", json.dumps({"elements": [{"active": True}]})],
    )
    def test_reports_and_exits_2(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "bad.json"
        path.write_text(content, encoding="utf-8")
        result = runner.invoke(app, ["connect", "--snapshot", str(path), "-i", "a", "-o", "b"])
        assert result.exit_code == 2
        assert "Invalid snapshot" in result.output
