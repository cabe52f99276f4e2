import pytest

from gdkit.ternary import pick


@pytest.mark.parametrize(
    ("condition", "yes", "no", "expected"),
    [
        (True, "true", "false", "true"),
        (False, "true", "false", "false"),
        (True, 1, 0, 1),
        (False, 1, 0, 0),
        (True, 1.0, 0.0, 1.0),
        (False, 1.0, 0.0, 0.0),
    ],
)
def test_pick(condition, yes, no, expected):
    assert pick(condition, yes, no) == expected