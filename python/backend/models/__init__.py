from backend.models.board import Board, Direction, InvalidBoardError

__all__ = ["Board", "Direction", "InvalidBoardError"]
