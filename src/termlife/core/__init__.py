"""Core cellular automaton logic."""

from .grid import Grid
from .game import GameOfLife, LifeConfig
from .patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "LifeConfig", "Pattern", "PatternLibrary"]
