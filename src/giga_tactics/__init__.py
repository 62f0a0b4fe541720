"""Expected-value combat and loot advisor for Gigaverse dungeon runs."""
from __future__ import annotations

__version__ = "0.1.0"
