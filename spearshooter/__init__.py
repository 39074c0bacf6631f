"""A small top-down arcade shooter built on pygame: knight, enemies and thrown stars."""

__version__ = "0.1.0"
__all__ = ["badguy", "player", "weapon", "game"]