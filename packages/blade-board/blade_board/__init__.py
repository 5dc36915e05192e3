"""blade-board - Local best-of-N leaderboard."""
from __future__ import annotations

from blade_board.board import DEFAULT_LIMIT, Entry, Leaderboard

__all__ = ["DEFAULT_LIMIT", "Entry", "Leaderboard"]
