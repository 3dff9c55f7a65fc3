from decimal import Decimal

from pytest import mark

from event_router.core.utils.dynamodb import unmarshall


@mark.parametrize(
    "attribute, expected",
    [
        ({"S": "hello"}, "hello"),
        ({"N": "42"}, 42),
        ({"N": "-7"}, -7),
        ({"N": "3.14"}, 3.14),
        ({"N": "1e3"}, 1000.0),
        ({"N": "not a number"}, None),
        ({"BOOL": True}, True),
        ({"NULL": True}, None),
        ({"B": "AQID"}, b"\x01\x02\x03"),
        ({"B": "%%%"}, None),
        ({"L": [{"S": "a"}, {"N": "1"}]}, ["a", 1]),
        (
            {"M": {"nested": {"M": {"flag": {"BOOL": False}}}}},
            {"nested": {"flag": False}},
        ),
        ({"SS": ["a", "b"]}, {"a", "b"}),
        ({"NS": ["1", "2.5"]}, {1, 2.5}),
        ({"BS": ["AQID"]}, {b"\x01\x02\x03"}),
        ({"XYZ": "unknown"}, None),
        ({"L": 5}, None),
        ({"M": "x"}, None),
        ({"SS": 5}, None),
        ({"NS": 5}, None),
        ({"BS": 5}, None),
        ({"SS": [["unhashable"]]}, None),
        ({"L": [{"M": "x"}, {"S": "ok"}]}, [None, "ok"]),
        ({}, None),
        ({"S": "a", "N": "1"}, None),
        ("plain", None),
    ],
)
def test_unmarshall(attribute, expected):
    assert unmarshall({"value": attribute}) == {"value": expected}


def test_unmarshall_item():
    item = {
        "pk": {"S": "user#1"},
        "age": {"N": "31"},
        "tags": {"L": [{"S": "admin"}, {"NULL": True}]},
    }

    assert unmarshall(item) == {"pk": "user#1", "age": 31, "tags": ["admin", None]}


def test_numbers_are_not_decimals():
    value = unmarshall({"n": {"N": "10"}})["n"]

    assert not isinstance(value, Decimal)
    assert isinstance(value, int)


def test_unmarshall_empty():
    assert unmarshall({}) == {}
