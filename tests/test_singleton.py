import threading

import pytest

from patternbook.singleton import call_count, change, do_a_call


def test_each_call_is_counted():
    before = call_count()
    do_a_call()
    do_a_call()
    do_a_call()
    assert call_count() == before + 3


def test_concurrent_calls_are_all_counted():
    before = call_count()
    threads = [threading.Thread(target=do_a_call) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert call_count() == before + 20


def test_change_increments():
    assert change(0) == 1
    assert change(change(0)) == 2


def test_change_overflow():
    with pytest.raises(OverflowError):
        change(2**32 - 1)