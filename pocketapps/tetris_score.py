"""Score, level and the persistent high score of a tetris game."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["ScoreBoard", "default_score_path"]

SCORE_FILE_NAME = ".tetris_score"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def default_score_path() -> Path:
    """Location of the high score file in the user's home directory."""
    home = os.environ.get("HOME")
    return (Path(home) if home else Path.home()) / SCORE_FILE_NAME


@dataclass
class ScoreBoard:
    """Current score and level, plus the high score kept in a file."""

    path: Path = field(default_factory=default_score_path)
    high_score: int = 0
    score: int = 0
    level: int = 0

    def load(self) -> None:
        """Read the high score; a missing file leaves it as it is."""
        try:
            text = Path(self.path).read_text()
        except FileNotFoundError:
            return
        except OSError as exc:
            print(f"error opening high score file in read mode: {exc}", file=sys.stderr)
            return
        match = _LEADING_INT.match(text)
        self.high_score = int(match.group(1)) if match else 0

    def save(self) -> None:
        """Write the high score to the file, reporting failure on stderr."""
        try:
            Path(self.path).write_text(f"{self.high_score}\n")
        except OSError as exc:
            print(f"error opening high score file in write mode: {exc}", file=sys.stderr)