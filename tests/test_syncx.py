import pytest

from gdkit.syncx import Once


def test_do_runs_once():
    counter = []
    once = Once()

    once.do(lambda: counter.append(1))
    assert len(counter) == 1

    once.do(lambda: counter.append(1))
    once.do(lambda: counter.append(1))
    assert len(counter) == 1


def test_reset_allows_one_more_run():
    counter = []
    once = Once()

    for _ in range(3):
        once.do(lambda: counter.append(1))
    assert len(counter) == 1

    once.reset()
    for _ in range(3):
        once.do(lambda: counter.append(1))
    assert len(counter) == 2


def test_failing_callable_still_counts_as_done():
    counter = []
    once = Once()

    def boom():
        counter.append(1)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        once.do(boom)
    once.do(lambda: counter.append(1))
    assert counter == [1]