"""
Unit Tests for Players and the Game Runner

Tests for move selection and the turn loop, focusing on:
    - Input parsing: accepted formats, re-prompting on bad input
    - AutoPlayer: engine-backed move choice
    - GameRunner: alternating turns, board output, results
    - CLI: argument handling, fatal invariant violations
"""

import pytest

from game_search.game import Position, TicTacToeState
from game_search.play import interface
from game_search.play.interface import GameRunner, main, search_config_from_args, build_parser
from game_search.players import AutoPlayer, InteractivePlayer, Player, parse_move
from game_search.search import SearchEngine


class FirstFreePlayer(Player):
    """Plays the first free cell in row-major order."""

    name = "first-free"

    def next_move(self, state):
        return state.free_positions()[0]


class OccupiedCellPlayer(Player):
    """Breaks the rules by replaying the top-left cell."""

    name = "cheater"

    def next_move(self, state):
        return Position(1, 1)


def scripted_input(lines):
    """Input function returning the given lines one by one."""
    iterator = iter(lines)
    return lambda prompt: next(iterator)


class TestParseMove:
    """Tests for move input parsing."""

    @pytest.mark.parametrize("text", ["13", "1 3", "1,3", " 1 , 3 \n"])
    def test_accepted_formats(self, text):
        assert parse_move(text) == Position(1, 3)

    @pytest.mark.parametrize("text", ["", "a3", "1", "123", "one three"])
    def test_rejected_formats(self, text):
        assert parse_move(text) is None


class TestInteractivePlayer:
    """Tests for the human player."""

    def test_reads_move(self):
        player = InteractivePlayer(input_fn=scripted_input(["22"]), output_fn=lambda _: None)

        assert player.next_move(TicTacToeState.new()) == Position(2, 2)

    def test_reprompts_until_valid(self):
        messages = []
        player = InteractivePlayer(
            input_fn=scripted_input(["abc", "44", "11", "13"]),
            output_fn=messages.append,
        )
        state = TicTacToeState.new().next_state(Position(1, 1))

        move = player.next_move(state)

        assert move == Position(1, 3)
        assert len(messages) == 3, "One message per rejected input"
        assert "out of range" in messages[1]
        assert "occupied" in messages[2]

    def test_end_of_input_propagates(self):
        player = InteractivePlayer(input_fn=scripted_input([]), output_fn=lambda _: None)

        with pytest.raises(StopIteration):
            player.next_move(TicTacToeState.new())


class TestAutoPlayer:
    """Tests for the engine-backed player."""

    def test_takes_immediate_win(self):
        player = AutoPlayer()

        move = player.next_move(TicTacToeState.from_string("xx./oo./..."))

        assert move == Position(1, 3)

    def test_blocks_threat(self):
        player = AutoPlayer()

        move = player.next_move(TicTacToeState.from_string("xx./.o./..."))

        assert move == Position(1, 3)

    def test_reuses_engine_cache_between_moves(self):
        engine = SearchEngine()
        player = AutoPlayer(engine)

        player.next_move(TicTacToeState.new())
        entries = len(engine.transposition_table)
        player.next_move(TicTacToeState.new().next_state(Position(1, 1)).next_state(Position(2, 2)))

        assert entries > 0
        assert len(engine.transposition_table) >= entries


class TestGameRunner:
    """Tests for the turn loop."""

    def test_engine_self_play_is_draw(self):
        output = []
        player = AutoPlayer()
        runner = GameRunner(player, AutoPlayer(), output_fn=output.append)

        final = runner.run()

        assert final.is_terminal()
        assert runner.result() == "Draw"
        assert len(runner.history) == 10, "Start position plus nine plies"
        assert output[-1] == "Draw"
        assert str(final) in output

    def test_engine_never_loses(self):
        runner = GameRunner(FirstFreePlayer(), AutoPlayer(), output_fn=lambda _: None)

        runner.run()

        assert runner.result() in ("Draw", "o wins")

    def test_engine_beats_naive_player(self):
        runner = GameRunner(AutoPlayer(), FirstFreePlayer(), output_fn=lambda _: None)

        runner.run()

        assert runner.result() == "x wins"

    def test_play_turn_alternates(self):
        runner = GameRunner(FirstFreePlayer(), FirstFreePlayer(), output_fn=lambda _: None)

        runner.play_turn()
        runner.play_turn()

        assert runner.state == TicTacToeState.from_string("xo./.../...")
        assert runner.result() == "In progress"

    def test_illegal_move_is_not_masked(self):
        runner = GameRunner(FirstFreePlayer(), OccupiedCellPlayer(), output_fn=lambda _: None)

        with pytest.raises(interface.InvariantViolation):
            runner.run()


class TestCommandLine:
    """Tests for the command-line entry point."""

    def test_auto_vs_auto(self, tmp_path, capsys):
        log_file = tmp_path / "game.log"

        main(["--x", "auto", "--o", "auto", "--log-file", str(log_file)])

        output = capsys.readouterr().out
        assert output.strip().splitlines()[-1] == "Draw"
        assert log_file.exists()
        assert "Game over" in log_file.read_text()

    def test_invariant_violation_exits(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr(interface, "make_player", lambda kind, config: OccupiedCellPlayer())

        with pytest.raises(SystemExit) as excinfo:
            main(["--log-file", str(tmp_path / "game.log")])

        assert excinfo.value.code == 1
        assert "IllegalMoveError" in capsys.readouterr().err

    def test_cache_policy_flag(self):
        parser = build_parser()

        assert not search_config_from_args(parser.parse_args(["--cache-policy", "none"])).use_cache
        assert search_config_from_args(parser.parse_args(["--cache-policy", "exact_only"])).cache_policy == "exact_only"
        assert search_config_from_args(parser.parse_args([])).cache_policy == "bounded"

    def test_unknown_player_type_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--x", "robot"])
