"""
Shared test fixtures.

External commands never run for real: `FakeRunner` replaces subprocess.run
inside the command module, records every argv and reproduces the filesystem
effect of each tool (git clone, wget, unzip, the Oh-My-Zsh installer).
"""

import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest

from devenv_installer.config import SetupConfig
from devenv_installer.context import SetupCtx
from devenv_installer.lib.env import resolve_paths

ZSHRC_TEMPLATE = """\
export ZSH="$HOME/.oh-my-zsh"

# See https://github.com/ohmyzsh/ohmyzsh/wiki/Themes
ZSH_THEME="robbyrussell"

plugins=(git)

source $ZSH/oh-my-zsh.sh
"""


class FakeRunner:
    def __init__(self, home: Path) -> None:
        self.home = home
        self.calls: List[List[str]] = []
        self.failures: List[str] = []

    # ── helpers for assertions ───────────────────────────────────

    def fail(self, prefix: str) -> None:
        """Make any command starting with `prefix` (sudo stripped) exit non-zero."""
        self.failures.append(prefix)

    @property
    def commands(self) -> List[str]:
        return [" ".join(_strip_sudo(argv)) for argv in self.calls]

    def ran(self, prefix: str) -> bool:
        return any(c.startswith(prefix) for c in self.commands)

    # ── subprocess.run replacement ───────────────────────────────

    def __call__(self, argv, input=None, text=True, cwd=None, env=None, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        cmd = _strip_sudo(argv)
        joined = " ".join(cmd)

        if any(joined.startswith(prefix) for prefix in self.failures):
            return subprocess.CompletedProcess(argv, 1, "", "simulated failure")

        stdout = ""
        tool = cmd[0]
        if tool == "curl":
            stdout = "#!/bin/sh\necho installing oh-my-zsh\n"
        elif tool == "sh":
            self._install_oh_my_zsh()
        elif tool == "git" and cmd[1] == "clone":
            rc = self._git_clone(cmd[-2], Path(cmd[-1]))
            if rc:
                return subprocess.CompletedProcess(argv, rc, "", "fatal: destination path already exists")
        elif tool == "wget":
            dest = Path(cmd[cmd.index("-O") + 1])
            dest.write_bytes(b"PK\x03\x04fake-zip")
        elif tool == "unzip":
            dest = Path(cmd[cmd.index("-d") + 1])
            dest.mkdir(parents=True, exist_ok=True)
            (dest / "RobotoMonoNerdFont-Regular.ttf").write_bytes(b"font")

        return subprocess.CompletedProcess(argv, 0, stdout, "")

    def _install_oh_my_zsh(self) -> None:
        omz = self.home / ".oh-my-zsh"
        (omz / "custom" / "themes").mkdir(parents=True, exist_ok=True)
        (omz / "oh-my-zsh.sh").write_text("# oh-my-zsh\n")
        zshrc = self.home / ".zshrc"
        if not zshrc.exists():
            zshrc.write_text(ZSHRC_TEMPLATE)

    def _git_clone(self, repo: str, dest: Path) -> int:
        if dest.exists() and any(dest.iterdir()):
            return 128
        (dest / ".git").mkdir(parents=True)
        (dest / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        if "powerlevel10k" in repo:
            (dest / "powerlevel10k.zsh-theme").write_text("# p10k\n")
        else:
            (dest / "lua" / "config").mkdir(parents=True)
            (dest / "init.lua").write_text('require("config.lazy")\n')
            (dest / "lua" / "config" / "lazy.lua").write_text("-- lazy\n")
        return 0


def _strip_sudo(argv: List[str]) -> List[str]:
    return argv[1:] if argv and argv[0] == "sudo" else argv


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """A fake $HOME with no setup done yet."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("ZSH_CUSTOM", raising=False)
    monkeypatch.delenv("DEVENV_INSTALLER_CONFIG", raising=False)
    monkeypatch.delenv("DEVENV_INSTALLER_LOG", raising=False)
    return home_dir


@pytest.fixture
def tmp_download_dir(tmp_path: Path, monkeypatch) -> Path:
    d = tmp_path / "tmp"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d


@pytest.fixture
def runner(home: Path, tmp_download_dir: Path, monkeypatch) -> FakeRunner:
    fake = FakeRunner(home)
    monkeypatch.setattr("devenv_installer.lib.command.subprocess.run", fake)
    return fake


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # main() would attach file/stdout handlers to the root logger for the whole session.
    monkeypatch.setattr("devenv_installer.main.configure_logging", lambda **kwargs: "test.log")


class ScriptedConfirm:
    """Stands in for the y/N prompt. answer=None means no prompt is expected."""

    def __init__(self, answer: Optional[bool]) -> None:
        self.answer = answer
        self.asked: List[str] = []

    def __call__(self, question: str) -> bool:
        self.asked.append(question)
        if self.answer is None:
            raise AssertionError(f"unexpected prompt: {question}")
        return self.answer


@pytest.fixture
def make_ctx(home: Path, tmp_download_dir: Path):
    """Build a SetupCtx from the (patched) environment."""

    def _make(answer: Optional[bool] = None, *, dry_run: bool = False, raw: Optional[dict] = None) -> SetupCtx:
        return SetupCtx(
            cfg=SetupConfig(raw=raw or {}),
            paths=resolve_paths(),
            dry_run=dry_run,
            confirm=ScriptedConfirm(answer),
        )

    return _make


@pytest.fixture
def snapshot():
    """Relative path -> bytes (None for directories) for every entry under a root."""

    def _snapshot(root: Path) -> dict:
        out = {}
        for p in sorted(root.rglob("*")):
            out[str(p.relative_to(root))] = None if p.is_dir() else p.read_bytes()
        return out

    return _snapshot
