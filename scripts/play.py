#!/usr/bin/env python3
"""Interactive CLI for playing Qirkat.

Usage:
    python scripts/play.py                        # Manual White vs AI Black
    python scripts/play.py --white ai --black ai  # Watch AI vs AI
    python scripts/play.py --config configs/play.yaml --seed 7 --depth 3

At a manual player's turn, enter a move such as c2-c3 or a1-c3-e5, or one of
the commands listed by 'help'.
"""

import argparse
import logging
import os
import sys

import yaml

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from qirkat.engine.players import AlphaBetaAgent, RandomAgent
from qirkat.game.board import INITIAL_LAYOUT
from qirkat.game.errors import QirkatError
from qirkat.game.notation import game_to_record, parse_move, result_string
from qirkat.game.state import Board, PieceColor

logger = logging.getLogger("qirkat.play")

DEFAULTS = {
    "white": "manual",
    "black": "ai",
    "depth": 5,
    "seed": None,
    "log_level": "INFO",
    "max_moves": 400,
    "board": INITIAL_LAYOUT,
    "turn": "white",
}

HELP = """Commands:
  c2-c3        make a move (jump chains as a1-c3-e5)
  moves        list legal moves
  undo         take back the last move (and the AI reply)
  dump         show the board
  seed N       reseed the AI players
  help         show this text
  quit         end the session"""


def load_config(path: str) -> dict:
    """Read the YAML config at PATH, falling back to defaults for missing keys."""
    config = dict(DEFAULTS)
    if path and os.path.exists(path):
        with open(path) as f:
            config.update(yaml.safe_load(f) or {})
    return config


def make_agent(kind: str, color: PieceColor, config: dict):
    if kind == "ai":
        return AlphaBetaAgent(color, depth=config["depth"], seed=config["seed"])
    if kind == "random":
        return RandomAgent(seed=config["seed"])
    if kind == "manual":
        return None
    raise ValueError(f"Unknown player type: {kind!r}")


def display_board(board: Board):
    print(board.str_with_legend())
    print()


def manual_turn(board: Board, agents: dict) -> bool:
    """Read commands until the manual player moves, or an undo hands the
    turn to an agent. Returns False to quit."""
    while True:
        try:
            line = input(f"{board.turn}: ").strip()
        except EOFError:
            return False
        if not line:
            continue
        command, *args = line.split()

        if command == "quit":
            return False
        if command == "help":
            print(HELP)
        elif command == "dump":
            display_board(board)
        elif command == "moves":
            print("  ".join(str(m) for m in board.legal_moves()))
        elif command == "seed":
            try:
                seed = int(args[0])
            except (IndexError, ValueError):
                print("Usage: seed N")
                continue
            for agent in agents.values():
                if isinstance(agent, AlphaBetaAgent):
                    agent.search.reseed(seed)
                elif isinstance(agent, RandomAgent):
                    agent.rng.seed(seed)
        elif command == "undo":
            try:
                board.undo()
                while board.history and agents[board.turn] is not None:
                    board.undo()
            except QirkatError as e:
                print(e)
                continue
            display_board(board)
            if agents[board.turn] is not None:
                return True
        else:
            try:
                move = parse_move(line)
                board.apply(move)
            except QirkatError as e:
                print(e)
                continue
            return True


def play(config: dict):
    """Run one session with the configured players."""
    turn = PieceColor[config["turn"].upper()]
    board = Board(config["board"], turn)
    agents = {
        PieceColor.WHITE: make_agent(config["white"], PieceColor.WHITE, config),
        PieceColor.BLACK: make_agent(config["black"], PieceColor.BLACK, config),
    }

    print("=" * 40)
    print("  Qirkat")
    print("=" * 40)
    print(f"  White: {config['white']}")
    print(f"  Black: {config['black']}")
    print("=" * 40)
    display_board(board)

    while not board.game_over and len(board.history) < config["max_moves"]:
        mover = board.turn
        agent = agents[mover]
        if agent is None:
            if not manual_turn(board, agents):
                print("Game aborted.")
                break
        else:
            move = agent.get_move(board)
            board.apply(move)
            print(f"{mover} moves {move}.")
        display_board(board)

    if board.game_over:
        print(f"{board.winner} wins.")
    logger.info("Game record:\n" + game_to_record(
        board.move_history,
        headers={"White": config["white"], "Black": config["black"]},
        result=result_string(board.winner)))


def main():
    parser = argparse.ArgumentParser(description="Play Qirkat")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--white", choices=["manual", "ai", "random"], default=None)
    parser.add_argument("--black", choices=["manual", "ai", "random"], default=None)
    parser.add_argument("--depth", type=int, default=None,
                        help="AI search depth in plies")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for AI tie-breaking")
    parser.add_argument("--board", type=str, default=None,
                        help="25-cell board description, bottom row first")
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args()

    config = load_config(args.config)
    for key in ("white", "black", "depth", "seed", "board", "log_level"):
        value = getattr(args, key)
        if value is not None:
            config[key] = value

    logging.basicConfig(level=getattr(logging, str(config["log_level"]).upper()),
                        format="%(asctime)s [%(name)s] %(message)s")

    play(config)


if __name__ == "__main__":
    main()
