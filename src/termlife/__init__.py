"""Terminal Conway's Game of Life with automatic reseeding."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.game import GameOfLife, LifeConfig
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "LifeConfig", "Pattern", "PatternLibrary"]
