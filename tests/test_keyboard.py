import pytest

from handmenu.keyboard import KEYBOARDS, VirtualKeyboard


def test_initial_selection_is_first_key():
    kb = VirtualKeyboard()
    assert kb.selected_key() == "q"
    assert kb.text == ""


def test_confirm_types_selected_key():
    kb = VirtualKeyboard("ab")
    kb.move(cols=1)
    assert kb.confirm() == "abw"


def test_move_left_wraps_to_last_column():
    kb = VirtualKeyboard()
    assert kb.move(cols=-1) == (0, kb.columns - 1)
    assert kb.selected_key() == KEYBOARDS[0][0][-1]


def test_move_right_past_end_wraps_to_zero():
    kb = VirtualKeyboard()
    kb.move(cols=kb.columns - 1)
    assert kb.move(cols=1) == (0, 0)


def test_move_up_wraps_to_last_row():
    kb = VirtualKeyboard()
    assert kb.move(rows=-1) == (kb.rows - 1, 0)
    assert kb.selected_key() == "_"


def test_move_down_past_end_wraps():
    kb = VirtualKeyboard()
    for _ in range(kb.rows):
        kb.move(rows=1)
    assert kb.row == 0


def test_next_keyboard_cycles():
    kb = VirtualKeyboard()
    seen = []
    for _ in range(len(KEYBOARDS)):
        kb.next_keyboard()
        seen.append(kb.current)
    assert seen[-1] == 0
    assert sorted(seen) == list(range(len(KEYBOARDS)))


@pytest.mark.parametrize("index, expected", [(-5, 0), (99, len(KEYBOARDS) - 1), (3, 3)])
def test_set_keyboard_clamps(index, expected):
    kb = VirtualKeyboard()
    kb.set_keyboard(index)
    assert kb.current == expected


def test_multibyte_keys_are_single_characters():
    kb = VirtualKeyboard()
    kb.set_keyboard(5)
    kb.move(cols=2)
    assert kb.confirm() == "а"
    assert kb.columns == len(KEYBOARDS[5][0])


def test_short_row_selects_nothing():
    kb = VirtualKeyboard("x")
    kb.set_keyboard(1)
    kb.move(rows=1, cols=kb.columns - 1)
    assert kb.selected_key() == ""
    assert kb.confirm() == "x"


def test_backspace_removes_one_character():
    kb = VirtualKeyboard("жз")
    assert kb.backspace() == "ж"
    assert kb.backspace() == ""
    assert kb.backspace() == ""


def test_space_appends():
    kb = VirtualKeyboard("a")
    assert kb.space() == "a "