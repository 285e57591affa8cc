"""
Runtime layer for the Hammurabi game.

This module coordinates the flow:
Saved game → State display → Turn engine → Narration → Rating
"""

from runtime.main import play_game, run_game, GameConfig, GameOutcome

__all__ = ["play_game", "run_game", "GameConfig", "GameOutcome"]
