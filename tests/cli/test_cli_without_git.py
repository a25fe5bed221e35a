"""Run go-init as a subprocess on a PATH that has go but no git."""

import os
import stat
import subprocess
import sys

import pytest

FAKE_GO = """#!/bin/sh
if [ "$1" = "mod" ] && [ "$2" = "init" ]; then
    printf 'module %s\\n\\ngo 1.22\\n' "$3" > go.mod
fi
exit 0
"""


@pytest.fixture
def path_without_git(tmp_path):
    """Return an environment whose PATH holds only a stub go executable."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    go = bin_dir / "go"
    go.write_text(FAKE_GO)
    go.chmod(go.stat().st_mode | stat.S_IXUSR)

    env = dict(os.environ)
    env["PATH"] = str(bin_dir)
    for name in ("GIT_PYTHON_GIT_EXECUTABLE", "GIT_PYTHON_REFRESH"):
        env.pop(name, None)
    return env


def _run_go_init(args, cwd, env, stdin):
    return subprocess.run(
        [sys.executable, "-m", "goinit"] + args,
        cwd=cwd, env=env, input=stdin,
        capture_output=True, text=True,
    )


@pytest.mark.integration
class TestWithoutGit:

    def test_prompts_for_username_and_warns_on_git_init(self, tmp_path, path_without_git):
        work_dir = tmp_path / "work"
        work_dir.mkdir()

        result = _run_go_init(["demo"], str(work_dir), path_without_git, "\n\n")

        assert result.returncode == 0, result.stderr
        assert "GitHub username (default: github-user): " in result.stdout
        assert "Module name (default github.com/github-user/demo): " in result.stdout
        assert "Error initializing Git repository" in result.stderr
        assert "Traceback" not in result.stderr
        assert "Happy coding!" in result.stdout
        assert (work_dir / "demo" / "cmd" / "demo" / "main.go").is_file()
        assert not (work_dir / "demo" / ".git").exists()

    def test_entered_username_used_in_module_name(self, tmp_path, path_without_git):
        work_dir = tmp_path / "work"
        work_dir.mkdir()

        result = _run_go_init(["demo"], str(work_dir), path_without_git, "bob\n\n")

        assert result.returncode == 0, result.stderr
        with open(work_dir / "demo" / "go.mod") as f:
            assert f.readline() == "module github.com/bob/demo\n"
