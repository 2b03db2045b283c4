from backend.engine.gamemoves.executor import MoveExecutor, SlotObserver

__all__ = ["MoveExecutor", "SlotObserver"]
