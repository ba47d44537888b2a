"""Version-control collaborator used to move and stage icon files."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class VersionControl(Protocol):
    """Operations the rename workflow needs from a version-control system."""

    def move(self, old_path: Path, new_path: Path) -> None:
        ...

    def stage(self, path: Path) -> None:
        ...


class GitCommandError(subprocess.CalledProcessError):
    """A git command failed; the message carries git's own explanation."""

    def __str__(self) -> str:
        message = super().__str__()
        detail = (self.stderr or "").strip()
        return f"{message}: {detail}" if detail else message


class GitRepository:
    """Run ``git mv`` and ``git add`` inside a working tree.

    Paths are resolved before being handed to git, so *cwd* only selects
    the repository. Failures raise :class:`GitCommandError`, a
    :class:`subprocess.CalledProcessError` whose message includes git's
    stderr. The repository is never committed to or pushed.
    """

    def __init__(self, cwd: str | Path | None = None) -> None:
        self.cwd = Path(cwd) if cwd is not None else None

    def move(self, old_path: Path, new_path: Path) -> None:
        self._run(["mv", "--", str(Path(old_path).resolve()), str(Path(new_path).resolve())])

    def stage(self, path: Path) -> None:
        self._run(["add", "--", str(Path(path).resolve())])

    def _run(self, args: Sequence[str]) -> str:
        command = ["git", *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.cwd,
            )
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(
                exc.returncode, exc.cmd, output=exc.output, stderr=exc.stderr
            ) from exc
        return result.stdout
