import sys

from patternbook.render_dialog import (
    HtmlDialog,
    WindowsDialog,
    make_dialog,
)

HTML_OUTPUT = "<button>Test Button</button>\nClick! Button says - 'Hello World!'\n"
WINDOWS_OUTPUT = "Drawing a Windows button\nClick! Hello, Windows!\n"


def test_html_dialog_render(capsys):
    HtmlDialog().render()
    assert capsys.readouterr().out == HTML_OUTPUT


def test_windows_dialog_render(capsys):
    WindowsDialog().render()
    assert capsys.readouterr().out == WINDOWS_OUTPUT


def test_refresh(capsys):
    HtmlDialog().refresh()
    assert capsys.readouterr().out == "Dialog - Refresh\n"


def test_factory_methods_create_matching_buttons(capsys):
    HtmlDialog().create_button().render()
    assert capsys.readouterr().out == HTML_OUTPUT
    WindowsDialog().create_button().render()
    assert capsys.readouterr().out == WINDOWS_OUTPUT


def test_make_dialog_explicit(capsys):
    make_dialog(True).render()
    assert capsys.readouterr().out == WINDOWS_OUTPUT
    make_dialog(False).render()
    assert capsys.readouterr().out == HTML_OUTPUT


def test_make_dialog_follows_platform(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "win32")
    make_dialog().render()
    assert capsys.readouterr().out == WINDOWS_OUTPUT
    monkeypatch.setattr(sys, "platform", "linux")
    make_dialog().render()
    assert capsys.readouterr().out == HTML_OUTPUT