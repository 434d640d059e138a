"""Tests for command execution."""

import subprocess
import sys
from pathlib import Path

import pytest

from git_build_source.core.exceptions import CommandExecutionError
from git_build_source.git.executor import CommandExecutor, SubprocessCommandExecutor


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    subprocess.run(["git", "init"], cwd=repo_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=repo_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=repo_path, capture_output=True, check=True,
    )

    (repo_path / "README.md").write_text("# Test Repo\n")
    subprocess.run(["git", "add", "."], cwd=repo_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=repo_path, capture_output=True, check=True,
    )

    return repo_path


@pytest.mark.unit
class TestSubprocessCommandExecutor:
    """Tests for SubprocessCommandExecutor."""

    def test_is_a_command_executor(self) -> None:
        assert isinstance(SubprocessCommandExecutor(), CommandExecutor)

    def test_returns_stdout(self, git_repo: Path) -> None:
        executor = SubprocessCommandExecutor()
        output = executor.execute(["git", "rev-parse", "HEAD"], git_repo)
        assert len(output.strip()) == 40  # Full SHA

    def test_runs_in_working_directory(self, git_repo: Path) -> None:
        executor = SubprocessCommandExecutor()
        output = executor.execute(["git", "ls-files"], git_repo)
        assert output.splitlines() == ["README.md"]

    def test_failing_command_raises(self, tmp_path: Path) -> None:
        executor = SubprocessCommandExecutor()
        with pytest.raises(CommandExecutionError) as exc_info:
            executor.execute(["git", "rev-parse", "HEAD"], tmp_path)
        assert exc_info.value.returncode != 0
        assert exc_info.value.command_line == ["git", "rev-parse", "HEAD"]
        assert exc_info.value.stderr

    def test_missing_working_directory_raises(self, tmp_path: Path) -> None:
        executor = SubprocessCommandExecutor()
        with pytest.raises(CommandExecutionError, match="Working directory"):
            executor.execute(["git", "status"], tmp_path / "missing")

    def test_missing_binary_raises(self, tmp_path: Path) -> None:
        executor = SubprocessCommandExecutor()
        with pytest.raises(CommandExecutionError, match="Command not found"):
            executor.execute(["definitely-not-a-real-binary-xyz"], tmp_path)

    def test_empty_command_line_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CommandExecutionError):
            SubprocessCommandExecutor().execute([], tmp_path)

    def test_timeout_raises(self, tmp_path: Path) -> None:
        executor = SubprocessCommandExecutor(timeout=0.1)
        with pytest.raises(CommandExecutionError, match="timed out"):
            executor.execute([sys.executable, "-c", "import time; time.sleep(5)"], tmp_path)

    def test_error_is_an_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SubprocessCommandExecutor().execute(["git", "status"], tmp_path / "missing")
