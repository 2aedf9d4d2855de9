import json

import pytest

from patternbook.memento import Originator, OriginatorBackup, demo, demo_json


def test_backup_round_trip():
    originator = Originator(state=7)
    backup = originator.save()
    originator.state = 9
    assert backup.restore() == Originator(state=7)


def test_backup_str():
    assert str(Originator(state=1).save()) == "Originator backup: '1'"


def test_json_format():
    assert Originator(state=1).to_json() == '{"state":1}'


@pytest.mark.parametrize("state", [0, 5, 2**32 - 1])
def test_json_round_trip(state):
    assert Originator.from_json(Originator(state=state).to_json()).state == state


@pytest.mark.parametrize(
    "text", ['{}', '{"state": "x"}', '{"state": -1}', '{"state": true}', "[1]"]
)
def test_from_json_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Originator.from_json(text)


def test_from_json_rejects_malformed_text():
    with pytest.raises(json.JSONDecodeError):
        Originator.from_json("not json")


def test_restore_of_bad_backup_raises():
    with pytest.raises(ValueError):
        OriginatorBackup(state="abc").restore()


def test_demo_restores_in_reverse(capsys):
    demo()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Originator backup: '1'",
        "Originator backup: '2'",
        "Restored to state: 2",
        "Restored to state: 1",
    ]


def test_demo_json_restores_in_reverse(capsys):
    demo_json()
    lines = capsys.readouterr().out.splitlines()
    assert lines[2:] == ["Restored to state: 2", "Restored to state: 1"]
    assert [Originator.from_json(line).state for line in lines[:2]] == [1, 2]