"""Text command interface."""

from .commands import Command, CommandRegistry, split_command
from .display import briefing_text, game_over_text, introduction, status_block

__all__ = [
    "Command",
    "CommandRegistry",
    "split_command",
    "briefing_text",
    "game_over_text",
    "introduction",
    "status_block",
]
