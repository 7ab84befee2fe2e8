"""Interactive terminal play for Klondike."""

from klondike.playtest.display import BoardRenderer, describe_action, format_card
from klondike.playtest.input import Command, CommandKind, CommandReader, InputResult
from klondike.playtest.runner import PlayResult, PlaySession

__all__ = [
    "BoardRenderer",
    "describe_action",
    "format_card",
    "Command",
    "CommandKind",
    "CommandReader",
    "InputResult",
    "PlayResult",
    "PlaySession",
]
