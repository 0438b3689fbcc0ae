"""
cli.py - Command-line interface for the Connect Four console game

Commands:
    play      interactive game, two humans or human vs computer (default)
    simulate  computer vs computer games on ConnectFourEnv with a tally
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.utils import Mark, GameState
from connectfour.game.rules import ConnectFourGame, ConnectFourEnv
from connectfour.players import HumanPlayer, ComputerPlayer, Player

MODE_TWO_PLAYERS = "1"
MODE_VS_COMPUTER = "2"


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def wait_for_keypress(input_fn: Callable[[str], str] = input) -> None:
    """Block until a key is pressed, or a line is read when stdin is not a terminal."""
    if input_fn is input and sys.stdin.isatty():
        try:
            import termios
            import tty
        except ImportError:  # Windows
            import msvcrt
            msvcrt.getwch()
            return

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        return

    input_fn("")


class SimpleCLI:
    """Console front end for Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four console game')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Logging verbosity, written to stderr')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write log messages to this file')
        parser.add_argument('--seed', type=int, default=None,
                            help='Seed for the computer player')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        subparsers.add_parser('play', help='Play a game interactively')

        simulate_parser = subparsers.add_parser(
            'simulate', help='Play computer vs computer games and report the results')
        simulate_parser.add_argument('--games', type=positive_int, default=100,
                                     help='Number of games to simulate')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging from them."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'simulate':
            self.simulate(self.args.games)
            return 0

        self.play_game()
        self.output_fn("Press any key to exit.")
        wait_for_keypress(self.input_fn)
        return 0

    def choose_mode(self) -> str:
        self.output_fn("Select game mode:")
        self.output_fn("1. Two Players")
        self.output_fn("2. Player vs. Computer")

        choice = self.input_fn("Enter your choice (1-2): ")
        while choice not in (MODE_TWO_PLAYERS, MODE_VS_COMPUTER):
            self.output_fn("Invalid choice. Please try again.")
            choice = self.input_fn("Enter your choice (1-2): ")
        return choice

    def create_players(self) -> List[Player]:
        """Prompt for names and mode, and build both players."""
        player1_name = self.input_fn("Enter Player 1's name: ")
        player1 = HumanPlayer(Mark.X, player1_name, self.input_fn, self.output_fn)
        self.output_fn("")

        mode = self.choose_mode()
        self.output_fn("")

        if mode == MODE_TWO_PLAYERS:
            player2_name = self.input_fn("Enter Player 2's name: ")
            player2 = HumanPlayer(Mark.O, player2_name, self.input_fn, self.output_fn)
        else:
            seed = getattr(self.args, 'seed', None)
            player2 = ComputerPlayer(Mark.O, "Computer", seed=seed)

        debug.info(f"Players: {player1!r} vs {player2!r}", "game")
        return [player1, player2]

    def play_game(self) -> GameState:
        """Play one interactive game and return its final state."""
        self.output_fn("Connect Four Game")
        self.output_fn("-----------------")
        self.output_fn("")

        player1, player2 = self.create_players()
        game = ConnectFourGame(player1, player2, output_fn=self.output_fn)
        return game.start()

    def simulate(self, games: int) -> Dict[GameState, int]:
        """
        Play computer vs computer games through ConnectFourEnv.

        Args:
            games: Number of games to play

        Returns:
            Count of games per terminal state
        """
        if games < 1:
            raise ValueError("Number of games must be positive")

        seed = getattr(self.args, 'seed', None)
        env = ConnectFourEnv()
        env.reset(seed=seed)
        computers = {
            Mark.X: ComputerPlayer(Mark.X, "Computer X", rng=env.np_random),
            Mark.O: ComputerPlayer(Mark.O, "Computer O", rng=env.np_random),
        }
        results = {state: 0 for state in GameState if state.is_game_over()}

        debug.start_timer("simulate")
        for _ in range(games):
            env.reset()
            terminated = False
            while not terminated:
                column = computers[env.current_mark].get_next_move(env.board)
                _, _, terminated, _, _ = env.step(column)
            results[env.game_state] += 1
        elapsed = debug.end_timer("simulate", "game")

        self.output_fn(f"Simulated {games} games")
        self.output_fn(f"X wins: {results[GameState.PLAYER_ONE_WINS]}")
        self.output_fn(f"O wins: {results[GameState.PLAYER_TWO_WINS]}")
        self.output_fn(f"Draws: {results[GameState.DRAW]}")
        if elapsed is not None:
            debug.info(f"{games} games in {elapsed:.3f} seconds", "game")
        return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
