from npuzzle.engine.gamestate.state import Phase, SessionState

__all__ = ["Phase", "SessionState"]
