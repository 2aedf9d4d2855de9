import pytest

from patternbook.simple_factory import IdButton, TitleButton, create_button, render_dialog


def test_low_number_gives_title_button():
    assert create_button(0.3) == TitleButton("Button")


@pytest.mark.parametrize("number", [0.5, 0.6, 1.0])
def test_high_number_gives_id_button(number):
    assert create_button(number) == IdButton(123)


def test_render_dialog_with_title(capsys):
    render_dialog(0.3)
    assert capsys.readouterr().out == "--- Title ---\n'Button'\n-------------\n"


def test_render_dialog_with_id(capsys):
    render_dialog(0.6)
    assert capsys.readouterr().out == "--- Title ---\nButton #123\n-------------\n"