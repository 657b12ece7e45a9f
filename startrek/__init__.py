"""Super Star Trek: a turn-based text simulation of the classic starship game."""

__version__ = "0.1.0"
