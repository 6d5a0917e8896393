from .pos import Board, Pos

__all__ = ["Pos", "Board"]
