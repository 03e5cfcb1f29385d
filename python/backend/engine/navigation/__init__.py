from backend.engine.navigation.shell import Shell, ViewListener

__all__ = ["Shell", "ViewListener"]
