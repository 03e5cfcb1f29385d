from backend.engine.sessionstate.state import MAX_ATTEMPTS, MAX_ROUNDS, SessionState

__all__ = ["MAX_ATTEMPTS", "MAX_ROUNDS", "SessionState"]
