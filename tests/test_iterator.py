import pytest

from patternbook.iterator import UserCollection, UserIterator, demo


def test_collection_yields_users_in_order():
    assert list(UserCollection()) == ["Alice", "Bob", "Carl"]


def test_iterator_stops_after_last_user():
    iterator = iter(UserCollection())
    assert next(iterator) == "Alice"
    assert next(iterator) == "Bob"
    assert next(iterator) == "Carl"
    with pytest.raises(StopIteration):
        next(iterator)
    assert next(iterator, None) is None


def test_each_iteration_starts_fresh():
    users = UserCollection()
    assert list(users) == ["Alice", "Bob", "Carl"]
    assert list(users) == ["Alice", "Bob", "Carl"]


def test_user_iterator_is_its_own_iterator():
    iterator = UserIterator(UserCollection())
    assert iter(iterator) is iterator
    assert len(list(iterator)) == 3


def test_demo_output(capsys):
    demo()
    out = capsys.readouterr().out
    assert "1nd element: 'Alice'" in out
    assert "4th element: None" in out
    assert "All elements in user collection: Alice Bob Carl" in out