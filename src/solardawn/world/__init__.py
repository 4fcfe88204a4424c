"""World state records.

Architecture Note:
    world/ holds the plain records the generator populates and the
    resolution engine later mutates. Records carry no cycles or references
    between each other beyond entity ids.
"""

from solardawn.world.bodies import MAX_ABUNDANCE, MajorBody, MinorBody
from solardawn.world.stack import Stack, Warhead
from solardawn.world.state import GameState, Phase

__all__ = [
    "MajorBody",
    "MinorBody",
    "MAX_ABUNDANCE",
    "Stack",
    "Warhead",
    "GameState",
    "Phase",
]
