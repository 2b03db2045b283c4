from backend.engine.gameplay.game import UNSOLVABLE_WARNING, GamePlay

__all__ = ["GamePlay", "UNSOLVABLE_WARNING"]
