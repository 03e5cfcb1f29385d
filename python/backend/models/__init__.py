from backend.models.events import OutcomeKind, SessionEvent
from backend.models.view import View
from backend.models.word import Level, WordEntry

__all__ = ["Level", "OutcomeKind", "SessionEvent", "View", "WordEntry"]
