import io

import pytest
from rich.console import Console

from termsnake.engine import ConfigError, Direction, EndReason, Ended, Exit, Move, Nop
from termsnake.linalg import Board, Pos
from termsnake.term import TerminalDrawer, TerminalTooSmallError, parse_keys
from termsnake.term.keys import split_keys


def goto(pos):
    """Cursor move for board cell ``pos`` (screen offset 3, 1-based)."""
    return f"\x1b[{pos.y + 4};{pos.x + 4}H"


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=True, color_system=None, width=80, height=40)


def output(console):
    return console.file.getvalue()


class TestKeys:
    @pytest.mark.parametrize(
        "data,command",
        [
            ("", Nop()),
            ("\x1b[A", Move(Direction.UP)),
            ("\x1b[B", Move(Direction.DOWN)),
            ("\x1b[C", Move(Direction.RIGHT)),
            ("\x1b[D", Move(Direction.LEFT)),
            ("\x1bOA", Move(Direction.UP)),
            ("w", Move(Direction.UP)),
            ("D", Move(Direction.RIGHT)),
            ("q", Exit()),
            ("\x1b", Exit()),
            ("x", Nop()),
        ],
    )
    def test_single_key(self, data, command):
        assert parse_keys(data) == command

    def test_last_key_wins(self):
        assert parse_keys("\x1b[A\x1b[D") == Move(Direction.LEFT)
        assert parse_keys("wq") == Exit()
        assert parse_keys("q\x1b[B") == Move(Direction.DOWN)

    def test_unknown_last_key_is_nop(self):
        assert parse_keys("\x1b[Az") == Nop()

    def test_split_keeps_sequences_whole(self):
        assert split_keys("\x1b[Cx\x1b") == ["\x1b[C", "x", "\x1b"]

    @pytest.mark.parametrize("data", ["\x1b[1;5A", "\x1b[1;5D", "\x1b[1;2C", "\x1b[3~", "\x1b[15~"])
    def test_unmapped_sequences_are_nop(self, data):
        assert parse_keys(data) == Nop()

    def test_modified_arrow_is_one_key(self):
        assert split_keys("\x1b[1;5Aw\x1b[3~") == ["\x1b[1;5A", "w", "\x1b[3~"]
        assert parse_keys("\x1b[1;5Aw") == Move(Direction.UP)

    def test_truncated_sequence_is_nop(self):
        assert split_keys("d\x1b[1;") == ["d", "\x1b[1;"]
        assert parse_keys("d\x1b[1;") == Nop()


class TestTerminalDrawer:
    def test_too_small(self, straight_game):
        small = Console(file=io.StringIO(), force_terminal=True, width=20, height=20)
        with pytest.raises(TerminalTooSmallError) as exc:
            TerminalDrawer(straight_game, small)
        assert isinstance(exc.value, ConfigError)

    def test_initial(self, straight_game, console):
        TerminalDrawer(straight_game, console).draw_initial(straight_game)
        out = output(console)
        assert goto(Pos(5, 8)) + "@" in out
        assert goto(Pos(4, 8)) + "o" in out
        assert goto(Pos(3, 8)) + "o" in out
        assert goto(straight_game.food.pos) + "¤" in out
        # Top border: 18 blocks starting one cell up-left of the board.
        assert goto(Pos(-1, -1)) + "█" * 18 in out

    def test_update_paints_only_changed_cells(self, straight_game, console):
        drawer = TerminalDrawer(straight_game, console)
        drawer.draw_initial(straight_game)
        console.file.truncate(0)
        console.file.seek(0)

        update = straight_game.exec(Nop()).update
        drawer.draw_update(straight_game, update)
        out = output(console)
        assert goto(Pos(3, 8)) + " " in out
        assert goto(Pos(5, 8)) + "o" in out
        assert goto(Pos(6, 8)) + "@" in out
        assert "¤" not in out

    def test_update_after_eating(self, straight_game, console):
        drawer = TerminalDrawer(straight_game, console)
        straight_game.food.pos = Pos(6, 8)
        update = straight_game.exec(Nop()).update
        drawer.draw_update(straight_game, update)
        out = output(console)
        assert goto(Pos(3, 8)) not in out
        assert goto(Pos(6, 8)) + "@" in out
        assert goto(straight_game.food.pos) + "¤" in out

    def test_board_full_paints_final_move(self, one_cell_left, console):
        drawer = TerminalDrawer(one_cell_left, console)
        assert one_cell_left.exec(Nop()) == Ended(EndReason.BOARD_FULL)
        drawer.draw_game_over(one_cell_left, EndReason.BOARD_FULL)
        out = output(console)
        assert goto(Pos(4, 4)) + "@" in out
        assert goto(Pos(3, 4)) + "o" in out
        assert "board full" in out

    def test_game_over_and_close(self, straight_game, console):
        drawer = TerminalDrawer(straight_game, console)
        drawer.draw_game_over(straight_game, EndReason.WALL)
        drawer.close(straight_game)
        out = output(console)
        assert "hit the wall" in out
        assert "\x1b[?25h" in out
