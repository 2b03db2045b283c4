from backend.engine.gamesolver.solver import (
    DEFAULT_MAX_NODES,
    HintResult,
    HintStatus,
    Solver,
)

__all__ = ["DEFAULT_MAX_NODES", "HintResult", "HintStatus", "Solver"]
