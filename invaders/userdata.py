"""Persistent per-player level and score records."""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_SAVE_FILE = "player_data.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_unsigned(text: str, bits: int) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid number in save file: {text!r}")
    return int(match.group(1)) % (1 << bits)


class PlayerStore:
    """A text file of lines "name,level,score", one per player."""

    def __init__(self, path=DEFAULT_SAVE_FILE):
        self.path = Path(path)

    def load_all(self) -> dict[str, tuple[int, int]]:
        """Read every record; a missing file means no records."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        data: dict[str, tuple[int, int]] = {}
        for line in content.split("\n"):
            parts = line.split(",", 2)
            if len(parts) < 3 or not parts[2]:
                continue
            name, level_text, score_text = parts
            data[name] = (_parse_unsigned(level_text, 16), _parse_unsigned(score_text, 32))
        return data

    def save_all(self, data) -> None:
        """Replace the file with the given records."""
        with self.path.open("w", encoding="utf-8") as file:
            for name, (level, score) in data.items():
                file.write(f"{name},{level},{score}\n")

    def last_level(self, name) -> int:
        return self.load_all().get(name, (0, 0))[0]

    def player_score(self, name) -> int:
        return self.load_all().get(name, (0, 0))[1]

    def save_player(self, name, level, score) -> None:
        """Store one player's record, keeping everyone else's."""
        data = self.load_all()
        data[name] = (int(level), int(score))
        self.save_all(data)