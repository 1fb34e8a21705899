from .fonts import CharMap
from . import case, cleanup, effects, encoding, fonts

__all__ = ["CharMap", "case", "cleanup", "effects", "encoding", "fonts"]
