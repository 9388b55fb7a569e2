from __future__ import annotations

import argparse
import logging

from .board import Board, is_valid_state
from .config import GameConfig, parse_mark
from .game import play_game, result_message, self_play, side_to_move
from .render import render_board
from .search import SearchStats, score_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment info and exit",
    )

    p_play = sub.add_parser("play", help="Play an interactive game against the engine")
    p_play.add_argument(
        "--human",
        choices=["X", "O", "x", "o"],
        default=None,
        help="Your mark; X moves first (default: $TTT_HUMAN_MARK or X)",
    )

    p_move = sub.add_parser("move", help="Compute the engine move for a board")
    p_move.add_argument(
        "--board",
        required=True,
        help="Board string, 9 cells of X/O/. e.g. XX.OO....",
    )
    p_move.add_argument(
        "--player",
        choices=["X", "O", "x", "o"],
        default=None,
        help="Mark to move (default: inferred from piece counts)",
    )

    p_self = sub.add_parser("selfplay", help="Let the engine play both sides")
    p_self.add_argument("--board", default=None, help="Starting board string (default: empty)")

    return p


def _print_info() -> None:
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")


def _load_board(raw: str | None) -> Board | None:
    try:
        board = Board.from_string((raw or "").strip())
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        try:
            config = GameConfig.from_env(ns.human)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        try:
            play_game(config)
        except (EOFError, KeyboardInterrupt):
            print()
            logging.info("Game aborted")
        return 0

    if ns.cmd == "move":
        board = _load_board(ns.board)
        if board is None:
            return 2
        if board.is_terminal():
            logging.error("Board is already finished: %s", result_message(board.winner()))
            return 2
        player = parse_mark(ns.player) if ns.player else side_to_move(board)
        stats = SearchStats()
        scores = score_moves(board, player, stats)
        # first maximum in ascending index order, same tie-break as best_move
        mv = max(scores, key=scores.__getitem__)
        print(f"move={mv}")
        logging.info(
            "player=%s nodes=%d cutoffs=%d scores=%s",
            player.value,
            stats.nodes,
            stats.cutoffs,
            scores,
        )
        return 0

    if ns.cmd == "selfplay":
        if ns.board is None:
            start = Board()
        else:
            start = _load_board(ns.board)
            if start is None:
                return 2
        final = self_play(start)
        print(render_board(final, show_indices=False))
        logging.info("final=%s result=%s", final, result_message(final.winner()))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
