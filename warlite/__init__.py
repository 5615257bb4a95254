"""Text-mode WAR board game: territory registration, map display and dice battles."""

__version__ = "0.1.0"
__all__ = ["territory", "battle", "adventurer", "novice"]