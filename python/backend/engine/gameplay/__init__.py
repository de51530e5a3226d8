from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.moves import ORDER, apply_move, successors

__all__ = ["GamePlay", "ORDER", "apply_move", "successors"]
