"""Tests for the process gateway."""

import subprocess
from pathlib import Path

import pytest

from gush_shared.gateway.process import real as real_module
from gush_shared.gateway.process.fake import FakeProcess
from gush_shared.gateway.process.real import RealProcess
from gush_shared.gateway.process.types import CommandOutcome


def test_real_process_reports_exit_status_and_output(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_run(args, **kwargs):
        calls.append((args, kwargs))
        return subprocess.CompletedProcess(args, 128, stdout="fatal: remote exists\n")

    monkeypatch.setattr(real_module.subprocess, "run", fake_run)

    line = "git remote add alice 'git@github.com:alice/w.git'"
    outcome = RealProcess().run_command(Path("/repo"), line)

    assert outcome == CommandOutcome(exit_status=128, output="fatal: remote exists\n")
    args, kwargs = calls[0]
    assert args == ["git", "remote", "add", "alice", "git@github.com:alice/w.git"]
    assert kwargs["cwd"] == Path("/repo")
    assert kwargs["stderr"] == subprocess.STDOUT
    assert kwargs["check"] is False


def test_real_process_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(real_module.subprocess, "run", fake_run)

    outcome = RealProcess().run_command(Path("/repo"), "nonexistent-tool --flag")

    assert outcome.exit_status == 127
    assert not outcome.succeeded
    assert "nonexistent-tool" in outcome.output


def test_fake_process_defaults_to_success() -> None:
    process = FakeProcess(outcomes={"bad": CommandOutcome(1, "boom")})

    assert process.run_command(Path("/r"), "good").succeeded
    assert process.run_command(Path("/r"), "bad") == CommandOutcome(1, "boom")
    assert process.run_lines == ["good", "bad"]


def test_real_process_unparsable_line(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args, **kwargs):
        raise AssertionError("subprocess.run should not be called")

    monkeypatch.setattr(real_module.subprocess, "run", fake_run)

    outcome = RealProcess().run_command(Path("/repo"), "git push -u alice it's-fix")

    assert outcome.exit_status == 2
    assert "No closing quotation" in outcome.output
