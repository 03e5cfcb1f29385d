from backend.engine.gameplay.session import ScrambleSession, SessionObserver

__all__ = ["ScrambleSession", "SessionObserver"]
