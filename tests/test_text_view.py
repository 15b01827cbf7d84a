"""
Tests for views.text_view module.
"""

import pytest

from core.game_state import new_game
from core.tower import TowerId
from views.text_view import HELP_TEXT, WIN_TEXT, WIN_TITLE, TextView


def _column(view: TextView, line: str, tower_id: TowerId) -> str:
    start = view.column_start(tower_id)
    return line[start:start + view.column_width]


def test_text_view_initialization():
    view = TextView(width=80)

    assert view.column_width == 24
    assert view.margin == 4

    with pytest.raises(ValueError):
        TextView(width=10)


def test_render_initial_frame():
    """Test the starting frame draws all discs on the middle tower."""
    view = TextView(width=80)
    lines = view.render(new_game().snapshot())

    # Pole tip, 4 disc rows, base, pointer, blank, help
    assert len(lines) == 9
    disc_rows = lines[1:5]
    for line in disc_rows:
        assert "=" in _column(view, line, TowerId.MIDDLE)
        assert "=" not in _column(view, line, TowerId.LEFT)
        assert "=" not in _column(view, line, TowerId.RIGHT)

    # Narrowest on top, widest at the bottom
    lengths = [_column(view, line, TowerId.MIDDLE).count("=") for line in disc_rows]
    assert lengths == sorted(lengths)
    assert lengths[0] < lengths[-1]

    assert lines[-1].strip() == HELP_TEXT


def test_render_pointer_caret():
    view = TextView(width=80)
    game = new_game()

    assert view.render_pointer(game.snapshot()).index("^") == view.column_center(TowerId.MIDDLE)

    game.retreat_pointer()
    assert view.render_pointer(game.snapshot()).index("^") == view.column_center(TowerId.LEFT)


def test_render_armed_disc():
    """Test the armed tower's top disc uses the armed fill."""
    view = TextView(width=80)
    game = new_game()
    game.activate()

    lines = view.render_towers(game.snapshot())

    assert "#" in _column(view, lines[1], TowerId.MIDDLE)
    assert all("#" not in line for line in lines[2:])


def test_render_win_banner_only_when_finished():
    view = TextView(width=80)
    game = new_game()

    assert WIN_TITLE not in view.render_text(game.snapshot())

    game.tower(TowerId.RIGHT).stack, game.tower(TowerId.MIDDLE).stack = (
        game.tower(TowerId.MIDDLE).stack, []
    )
    game.evaluate_win()
    text = view.render_text(game.snapshot())

    assert WIN_TITLE in text
    assert WIN_TEXT in text
