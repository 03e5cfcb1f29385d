from backend.engine.scrambler.scrambler import Scrambler

__all__ = ["Scrambler"]
