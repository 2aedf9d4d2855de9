import pytest

from patternbook.template_method import (
    ConcreteClass1,
    ConcreteClass2,
    TemplateMethod,
    client_code,
    demo,
)


def test_concrete1_runs_steps_in_order(capsys):
    client_code(ConcreteClass1())
    assert capsys.readouterr().out.splitlines() == [
        "TemplateMethod says: I am doing the bulk of the work",
        "ConcreteStruct1 says: Implemented Operation1",
        "TemplateMethod says: But I let subclasses override some operations",
        "ConcreteStruct1 says: Implemented Operation2",
        "TemplateMethod says: But I am doing the bulk of the work anyway",
    ]


def test_concrete2_uses_its_own_steps(capsys):
    ConcreteClass2().template_method()
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "ConcreteStruct2 says: Implemented Operation1"
    assert lines[3] == "ConcreteStruct2 says: Implemented Operation2"


def test_hooks_are_called_in_place(capsys):
    class Hooked(ConcreteClass1):
        def hook1(self):
            print("hook1")

        def hook2(self):
            print("hook2")

    client_code(Hooked())
    lines = capsys.readouterr().out.splitlines()
    assert lines.index("hook1") == 3
    assert lines[-1] == "hook2"


def test_required_operations_are_abstract():
    with pytest.raises(TypeError):
        TemplateMethod()


def test_demo_output(capsys):
    demo()
    lines = capsys.readouterr().out.splitlines()
    header = "Same client code can work with different concrete implementations:"
    assert lines.count(header) == 2
    assert lines[6] == ""
    assert len(lines) == 13