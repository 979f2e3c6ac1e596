"""A rules engine and interactive shell for a Coup-style game with character roles."""

__version__ = "0.1.0"
__all__ = ["actions", "game", "player", "roles", "table", "cli"]