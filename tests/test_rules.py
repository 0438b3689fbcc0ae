"""
Tests for the ConnectFourGame controller and the ConnectFourEnv environment.
"""

import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourGame, ConnectFourEnv
from connectfour.players import ComputerPlayer, HumanPlayer
from connectfour.utils import ROWS, COLS, Mark, GameState
from tests.helpers import ScriptedPlayer, ConsoleFeeder, DRAW_SEQUENCE


def split_sequence(sequence):
    return sequence[0::2], sequence[1::2]


class TestConnectFourGame:
    """Test turn order, termination and result reporting."""

    def test_initial_state(self, output):
        p1 = ScriptedPlayer(Mark.X, "Alice", [])
        p2 = ScriptedPlayer(Mark.O, "Bob", [])
        game = ConnectFourGame(p1, p2, output_fn=output.append)
        assert game.current_player is p1
        assert game.state == GameState.IN_PROGRESS
        assert not game.board.grid.any()

    def test_same_marks_rejected(self):
        with pytest.raises(ValueError):
            ConnectFourGame(ScriptedPlayer(Mark.X, "a", []), ScriptedPlayer(Mark.X, "b", []))

    def test_turns_alternate(self, output):
        p1 = ScriptedPlayer(Mark.X, "Alice", [0, 0])
        p2 = ScriptedPlayer(Mark.O, "Bob", [1])
        game = ConnectFourGame(p1, p2, output_fn=output.append)

        assert game.play_turn() == GameState.IN_PROGRESS
        assert game.current_player is p2
        game.play_turn()
        assert game.current_player is p1
        game.play_turn()
        assert game.board.grid[0, 0] == Mark.X.value
        assert game.board.grid[0, 1] == Mark.O.value
        assert game.board.grid[1, 0] == Mark.X.value

    def test_vertical_win_scenario(self, output):
        p1 = ScriptedPlayer(Mark.X, "Alice", [3, 3, 3, 3])
        p2 = ScriptedPlayer(Mark.O, "Bob", [4, 4, 4])
        game = ConnectFourGame(p1, p2, output_fn=output.append)

        assert game.start() == GameState.PLAYER_ONE_WINS
        assert game.current_player is p1
        assert p2.turns == 3
        assert output[-1] == "Alice wins!"
        # 7 renders of board + blank line, then the result
        assert len(output) == 8 * 2 + 1
        assert output[-3].splitlines()[-1] == ". . . X O . ."

    def test_player_two_win(self, output):
        p1 = ScriptedPlayer(Mark.X, "Alice", [0, 1, 0, 1, 6])
        p2 = ScriptedPlayer(Mark.O, "Bob", [2, 2, 2, 2])
        game = ConnectFourGame(p1, p2, output_fn=output.append)
        assert game.start() == GameState.PLAYER_TWO_WINS
        assert output[-1] == "Bob wins!"
        assert p1.columns == [6]

    def test_draw_scenario(self, output):
        x_moves, o_moves = split_sequence(DRAW_SEQUENCE)
        p1 = ScriptedPlayer(Mark.X, "Alice", x_moves)
        p2 = ScriptedPlayer(Mark.O, "Bob", o_moves)
        game = ConnectFourGame(p1, p2, output_fn=output.append)

        assert game.start() == GameState.DRAW
        assert game.board.is_full()
        assert output[-1] == "The game ended in a draw."
        assert p1.columns == [] and p2.columns == []

    def test_play_turn_after_game_over_is_noop(self, output):
        p1 = ScriptedPlayer(Mark.X, "Alice", [3, 3, 3, 3])
        p2 = ScriptedPlayer(Mark.O, "Bob", [4, 4, 4])
        game = ConnectFourGame(p1, p2, output_fn=output.append)
        game.start()
        moves = len(game.board.moves_made)
        assert game.play_turn() == GameState.PLAYER_ONE_WINS
        assert len(game.board.moves_made) == moves

    def test_uses_given_board(self, output):
        board = Board()
        board.apply_move(0, Mark.O)
        game = ConnectFourGame(ScriptedPlayer(Mark.X, "a", [0]),
                               ScriptedPlayer(Mark.O, "b", []),
                               board=board, output_fn=output.append)
        game.play_turn()
        assert board.column_height(0) == 2

    @pytest.mark.parametrize("state, message", [
        (GameState.DRAW, "The game ended in a draw."),
        (GameState.PLAYER_ONE_WINS, "Alice wins!"),
        (GameState.PLAYER_TWO_WINS, "Bob wins!"),
        (GameState.IN_PROGRESS, ""),
    ])
    def test_result_messages(self, state, message):
        game = ConnectFourGame(ScriptedPlayer(Mark.X, "Alice", []),
                               ScriptedPlayer(Mark.O, "Bob", []))
        assert game.get_result_message(state) == message

    def test_human_against_computer_finishes(self, output):
        feeder = ConsoleFeeder(str(c % COLS) for c in range(1000))
        human = HumanPlayer(Mark.X, "Alice", feeder, output.append)
        computer = ComputerPlayer(Mark.O, seed=5)
        game = ConnectFourGame(human, computer, output_fn=output.append)

        state = game.start()
        assert state.is_game_over()
        assert output[-1] in ("Alice wins!", "Computer wins!", "The game ended in a draw.")
        assert game.board.evaluate_state() == state


class TestConnectFourEnv:
    """Test the Gymnasium environment."""

    def test_reset(self):
        env = ConnectFourEnv()
        obs, info = env.reset(seed=0)
        assert obs.shape == (ROWS, COLS)
        assert obs.dtype == np.int8
        assert env.observation_space.contains(obs)
        assert info['valid_moves'] == list(range(COLS))
        assert info['current_mark'] == "X"
        assert info['game_state'] == "IN_PROGRESS"

    def test_marks_alternate(self):
        env = ConnectFourEnv()
        env.reset()
        obs, reward, terminated, truncated, info = env.step(3)
        assert obs[0, 3] == Mark.X.value
        assert (reward, terminated, truncated) == (0.0, False, False)
        assert info['current_mark'] == "O"
        obs, _, _, _, info = env.step(3)
        assert obs[1, 3] == Mark.O.value
        assert info['moves_made'] == 2

    def test_x_win_reward(self):
        env = ConnectFourEnv()
        env.reset()
        for action in [0, 1, 0, 1, 0, 1]:
            env.step(action)
        _, reward, terminated, truncated, info = env.step(0)
        assert reward == env.reward_win
        assert terminated and not truncated
        assert info['game_state'] == "PLAYER_ONE_WINS"
        assert info['valid_moves'] == []
        assert sorted(info['winning_line']) == [(0, 0), (1, 0), (2, 0), (3, 0)]

    def test_o_win_reward(self):
        env = ConnectFourEnv()
        env.reset()
        for action in [0, 1, 0, 1, 2, 1, 6]:
            env.step(action)
        _, reward, terminated, _, _ = env.step(1)
        assert reward == env.reward_lose
        assert terminated

    def test_draw_reward(self):
        env = ConnectFourEnv()
        env.reset()
        for action in DRAW_SEQUENCE[:-1]:
            env.step(action)
        _, reward, terminated, _, info = env.step(DRAW_SEQUENCE[-1])
        assert reward == env.reward_draw
        assert terminated
        assert info['game_state'] == "DRAW"

    def test_invalid_action(self):
        env = ConnectFourEnv()
        env.reset()
        for _ in range(ROWS):
            env.step(5)
        obs_before = env.board.get_state()
        mark_before = env.current_mark

        obs, reward, terminated, truncated, info = env.step(5)
        assert reward == env.reward_invalid_move
        assert truncated and not terminated
        assert info['invalid_move'] is True
        np.testing.assert_array_equal(obs, obs_before)
        assert env.current_mark is mark_before

    def test_step_after_game_over_raises(self):
        env = ConnectFourEnv()
        env.reset()
        for action in [0, 1, 0, 1, 0, 1, 0]:
            env.step(action)
        with pytest.raises(RuntimeError):
            env.step(2)

    def test_reset_clears_board(self):
        env = ConnectFourEnv()
        env.reset()
        env.step(2)
        obs, info = env.reset()
        assert not obs.any()
        assert info['current_mark'] == "X"

    def test_ascii_render(self):
        env = ConnectFourEnv(render_mode="ascii")
        env.reset()
        env.step(0)
        assert env.render().splitlines()[-1] == "X . . . . . ."

    def test_unknown_render_mode(self):
        with pytest.raises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")
