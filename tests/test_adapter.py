from patternbook.adapter import OrdinaryTarget, SpecificTarget, TargetAdapter, call


def test_ordinary_request():
    assert OrdinaryTarget().request() == "Ordinary request."


def test_specific_request():
    assert SpecificTarget().specific_request() == ".tseuqer cificepS"


def test_adapter_reverses_specific_request():
    assert TargetAdapter(SpecificTarget()).request() == "Specific request."


def test_call_quotes_request(capsys):
    call(OrdinaryTarget())
    assert capsys.readouterr().out == "'Ordinary request.'\n"


def test_call_with_adapter(capsys):
    call(TargetAdapter(SpecificTarget()))
    assert capsys.readouterr().out == "'Specific request.'\n"