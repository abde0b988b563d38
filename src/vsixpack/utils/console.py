from __future__ import annotations

import sys
from typing import TextIO


def _squash(s: str, max_len: int = 200) -> str:
    s = " ".join((s or "").split())
    return s if len(s) <= max_len else s[: max_len - 1] + "…"


class ConsoleLog:
    """
    Tagged one-line progress for `vsixpack` commands.

    Progress goes to `out` (stdout), problems to `err` (stderr), so
    `vsixpack ls > files.txt` only captures file paths.
    """

    def __init__(self, tag: str, out: TextIO | None = None, err: TextIO | None = None):
        self.tag = tag
        self.out = out
        self.err = err

    def _emit(self, mark: str, msg: str, stream: TextIO) -> None:
        print(f"[{self.tag} {mark}] {_squash(msg)}", file=stream)

    def info(self, msg: str):
        self._emit("✅", msg, self.out or sys.stdout)

    def stage(self, emoji: str, msg: str):
        self._emit(emoji, msg, self.out or sys.stdout)

    def warn(self, msg: str):
        self._emit("⚠️", msg, self.err or sys.stderr)

    def error(self, msg: str):
        self._emit("❌", msg, self.err or sys.stderr)
