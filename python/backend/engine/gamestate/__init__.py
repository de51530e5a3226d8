from backend.engine.gamestate.state import SearchNode

__all__ = ["SearchNode"]
