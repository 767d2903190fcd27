"""Tests for agents and the game driver."""

from qirkat.engine.players import AlphaBetaAgent, ManualAgent, RandomAgent, play_game
from qirkat.game.rules import replay
from qirkat.game.state import Board, Move, PieceColor

WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK

DOUBLE_CAPTURE = "w - - - -  - b - - -  - - - - -  - - - b -  - - - - -"
STRANDED = "- - - - b  - - - - -  - - - - -  - - - - -  w - - - -"


def scripted(lines):
    """A move source that hands out LINES in order, then None."""
    queue = list(lines)
    prompts = []

    def source(prompt):
        prompts.append(prompt)
        return queue.pop(0) if queue else None
    source.prompts = prompts
    return source


class TestRandomAgent:
    def test_plays_legal_moves(self, board):
        agent = RandomAgent(seed=0)
        for _ in range(20):
            if board.game_over:
                break
            move = agent.get_move(board)
            assert board.legal(move)
            board.apply(move)

    def test_seeded(self, board):
        assert RandomAgent(seed=5).get_move(board) == RandomAgent(seed=5).get_move(board)

    def test_no_moves(self, make_board):
        assert RandomAgent(seed=0).get_move(make_board(STRANDED)) is None


class TestManualAgent:
    def test_retries_until_legal(self, board):
        reports = []
        source = scripted(["garbage", "", "c3-c4", "c2-c3"])
        agent = ManualAgent(source, prompt="White: ", report=reports.append)
        assert agent.get_move(board) == Move.step(7, 12)
        assert len(reports) == 2
        assert reports[0].startswith("Invalid move")
        assert reports[1] == "That move is not legal: c3-c4"
        assert source.prompts == ["White: "] * 4

    def test_bad_geometry_is_reported(self, board):
        reports = []
        agent = ManualAgent(scripted(["a1-a4", "d2-c3"]), report=reports.append)
        assert agent.get_move(board) == Move.step(8, 12)
        assert len(reports) == 1

    def test_quit(self, board):
        agent = ManualAgent(scripted([]), report=lambda msg: None)
        assert agent.get_move(board) is None


class TestAlphaBetaAgent:
    def test_plays_own_color(self, board):
        agent = AlphaBetaAgent(WHITE, depth=2, seed=0)
        assert board.legal(agent.get_move(board))


class TestPlayGame:
    def test_winning_chain(self, make_board):
        reports = []
        moves, winner = play_game(AlphaBetaAgent(WHITE, depth=2), RandomAgent(seed=0),
                                  board=make_board(DOUBLE_CAPTURE),
                                  report=reports.append)
        assert moves == [Move((0, 12, 24), is_jump=True)]
        assert winner == WHITE
        assert reports == ["White moves a1-c3-e5.", "White wins."]

    def test_random_game_replays(self):
        board = Board()
        moves, winner = play_game(RandomAgent(seed=1), RandomAgent(seed=2), board=board,
                                  report=lambda msg: None)
        assert len(moves) <= 400
        assert board.move_history == moves
        assert replay(moves) == board
        if winner is not None:
            assert board.game_over
            assert not board.legal_moves()

    def test_move_limit(self):
        moves, winner = play_game(RandomAgent(seed=3), RandomAgent(seed=4), max_moves=4,
                                  report=lambda msg: None)
        assert len(moves) == 4
        assert winner is None

    def test_agent_quits(self):
        moves, winner = play_game(ManualAgent(scripted(["c2-c3"]), report=lambda m: None),
                                  RandomAgent(seed=0), report=lambda msg: None)
        assert len(moves) == 2
        assert winner is None

    def test_finished_game_plays_nothing(self, make_board):
        reports = []
        moves, winner = play_game(RandomAgent(), RandomAgent(),
                                  board=make_board(STRANDED), report=reports.append)
        assert moves == []
        assert winner == BLACK
        assert reports == ["Black wins."]
