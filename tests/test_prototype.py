from patternbook.prototype import Circle, demo


def test_clone_is_equal_but_distinct():
    original = Circle(x=10, y=15, radius=10)
    copy = original.clone()
    assert copy == original
    assert copy is not original


def test_clone_is_independent():
    original = Circle(x=10, y=15, radius=10)
    copy = original.clone()
    copy.radius = 77
    copy.x = 1
    assert original.radius == 10
    assert original.x == 10
    assert copy.y == original.y


def test_demo_output(capsys):
    demo()
    assert capsys.readouterr().out == "Circle 1: 10, 15, 10\nCircle 2: 10, 15, 77\n"