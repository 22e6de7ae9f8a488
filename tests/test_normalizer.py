"""Tests for objectify() and stringify()."""

import datetime
import json
import math
from collections import OrderedDict
from dataclasses import dataclass

import pytest

from log_router.normalizer import objectify, stringify, to_iso_utc


class Foo:
    def __init__(self, v):
        self.k = v


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self):
        self.a = 1
        self.b = 2


@dataclass
class Point:
    x: int
    y: int


class Printable:
    def __init__(self, v):
        self.k = v

    def __str__(self):
        return json.dumps(self.k)


NAN = float("nan")
NEG_ZERO = -0.0

SCALARS = [
    "Hello, world", "",
    42, 0, NEG_ZERO, 0.0, NAN, float("-inf"), float("inf"),
    None,
    True, False,
    b"raw",
]


class TestObjectify:
    def test_list_becomes_plain_dict(self):
        result = objectify(["a", "b"])
        assert type(result) is dict
        assert result == {"0": "a", "1": "b"}

    def test_tuple_becomes_plain_dict(self):
        assert objectify(("x",)) == {"0": "x"}

    def test_empty_list(self):
        assert objectify([]) == {}

    @pytest.mark.parametrize("value", SCALARS, ids=repr)
    def test_scalars_wrapped_with_value_key(self, value):
        result = objectify(value)
        assert type(result) is dict
        assert list(result) == ["value"]
        # Same object: NaN and -0.0 survive untouched
        assert result["value"] is value

    def test_negative_zero_keeps_sign(self):
        assert math.copysign(1.0, objectify(NEG_ZERO)["value"]) == -1.0

    def test_nan_stays_nan(self):
        assert math.isnan(objectify(NAN)["value"])

    def test_plain_dict_is_returned_as_is(self):
        raw = {"a": "b"}
        assert objectify(raw) is raw

    def test_dict_subclass_downgraded(self):
        raw = OrderedDict(a=1)
        result = objectify(raw)
        assert type(result) is dict
        assert result == {"a": 1}
        assert result is not raw

    def test_datetime_to_iso_string(self):
        d = datetime.datetime(2016, 6, 24, 16, 0, 30, 250000, tzinfo=datetime.timezone.utc)
        assert objectify(d) == "2016-06-24T16:00:30.250Z"

    def test_aware_datetime_converted_to_utc(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        d = datetime.datetime(2016, 6, 24, 18, 0, 30, 250000, tzinfo=tz)
        assert objectify(d) == "2016-06-24T16:00:30.250Z"

    def test_naive_datetime_taken_as_utc(self):
        d = datetime.datetime(2016, 6, 24, 16, 0, 30)
        assert objectify(d) == "2016-06-24T16:00:30.000Z"

    def test_date_to_iso_string(self):
        assert objectify(datetime.date(2016, 6, 24)) == "2016-06-24T00:00:00.000Z"

    def test_classed_object_downgraded(self):
        initial = Foo("foo")
        result = objectify(initial)
        assert type(result) is dict
        assert list(result) == ["k"]
        assert result["k"] == "foo"
        assert result is not initial
        assert result != initial

    def test_result_is_a_copy_of_attributes(self):
        initial = Foo("foo")
        result = objectify(initial)
        result["extra"] = 1
        assert not hasattr(initial, "extra")

    def test_slotted_object(self):
        assert objectify(Slotted()) == {"a": 1, "b": 2}

    def test_dataclass(self):
        assert objectify(Point(1, 2)) == {"x": 1, "y": 2}

    def test_attributeless_object(self):
        assert objectify(object()) == {}


class TestToIsoUtc:
    def test_millisecond_truncation(self):
        d = datetime.datetime(2020, 1, 2, 3, 4, 5, 678999)
        assert to_iso_utc(d) == "2020-01-02T03:04:05.678Z"


class TestStringify:
    @pytest.mark.parametrize("doc,expected", [
        ({"message": "foo"}, "foo"),
        ({"message": 25}, "25"),
        ({"message": Printable("foo")}, '"foo"'),
        ({}, "{}"),
        ([], "[]"),
        ("foo", "foo"),
        ("", ""),
    ])
    def test_conversions(self, doc, expected):
        assert stringify(doc) == expected

    def test_mapping_without_message_is_dumped(self):
        assert stringify({"level": 3}) == "{ level: 3 }"

    def test_null_message_is_dumped(self):
        assert stringify({"message": None}) == "{ message: None }"

    def test_other_values_use_str(self):
        assert stringify(25) == "25"
        assert stringify(Printable([1])) == "[1]"
