import pytest

from gdkit.sortx import Order, Sort, new_sorts

EXPECTED = [
    Sort(key="id", order=Order.DESCENDING, original="id:desc"),
    Sort(key="status", order=Order.ASCENDING, original="status:asc"),
    Sort(key="created_at", order=Order.ASCENDING, original="created_at"),
]


@pytest.mark.parametrize(
    "qs",
    ["id:desc,status:asc,created_at", "ID:DESC,Status:Asc,created_at"],
)
def test_new_sorts(qs):
    assert list(new_sorts(qs)) == EXPECTED


def test_unknown_order_is_ascending():
    assert list(new_sorts("name:sideways")) == [
        Sort(key="name", order=Order.ASCENDING, original="name:sideways")
    ]


def test_order_by():
    sorts = new_sorts("id:desc,status:asc")
    assert sorts.order_by() == "id DESC, status ASC"
    assert sorts.order_by(reverse=True) == "id ASC, status DESC"


def test_as_dict():
    assert new_sorts("id:desc,status").as_dict() == {"id": "DESC", "status": "ASC"}


def test_desc():
    assert new_sorts("id:desc,status").desc() is True
    assert new_sorts("id,status:asc").desc() is False