from npuzzle_host.cli.app import parse_selection, play_session, render_board, run

__all__ = ["parse_selection", "play_session", "render_board", "run"]
