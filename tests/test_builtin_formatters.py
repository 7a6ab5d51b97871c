"""Tests for formatting/builtins.py.

Rendering of every built-in formatter, item caps, line-break layout, and
the shared built-in registry.

Python 3.13+.
"""

from __future__ import annotations

import collections
import enum
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta, timezone
from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from assertfmt.formatting import Formatter, FormattingOptions
from assertfmt.formatting.builtins import (
    BoolFormatter,
    BytesFormatter,
    CollectionFormatter,
    DateTimeFormatter,
    DefaultFormatter,
    EnumFormatter,
    ExceptionFormatter,
    MappingFormatter,
    NoneFormatter,
    NumberFormatter,
    ObjectFormatter,
    StringFormatter,
    TimeDeltaFormatter,
    TypeFormatter,
    create_builtin_registry,
    get_builtin_registry,
    qualified_name,
)


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Level(enum.IntEnum):
    LOW = 1


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Empty:
    pass


@dataclass
class Secretive:
    visible: int
    hidden: int = field(default=0, repr=False)


class Plain:
    def __init__(self) -> None:
        self.a = 1
        self._private = 2


class CustomRepr:
    def __init__(self) -> None:
        self.a = 1

    def __repr__(self) -> str:
        return "CustomRepr!"


class Bare:
    pass


def render(value: object, **settings: object) -> str:
    return Formatter(FormattingOptions(**settings)).to_string(value)  # type: ignore[arg-type]


# ============================================================================
# Atomic Values
# ============================================================================


class TestAtomicFormatters:
    """Test scalar renderings."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            (True, "True"),
            (False, "False"),
            (Color.RED, "Color.RED"),
            (Level.LOW, "Level.LOW"),
            ("it's", '"it\'s"'),
            ("", "''"),
            (b"ab", "b'ab'"),
            (bytearray(b"x"), "bytearray(b'x')"),
            (42, "42"),
            (1.5, "1.5"),
            (2 + 3j, "(2+3j)"),
            (Decimal("1.5"), "Decimal('1.5')"),
            (Fraction(3, 4), "Fraction(3, 4)"),
            (int, "int"),
            (collections.OrderedDict, "collections.OrderedDict"),
        ],
    )
    def test_rendering(self, value: object, expected: str) -> None:
        """Each scalar renders in its documented form."""
        assert render(value) == expected

    @given(st.text())
    def test_strings_render_as_repr(self, value: str) -> None:
        """Any string renders exactly as its repr."""
        assert render(value) == repr(value)

    @given(st.integers() | st.floats(allow_nan=False))
    def test_numbers_render_as_repr(self, value: float) -> None:
        """Any int or float renders exactly as its repr."""
        assert render(value) == repr(value)

    def test_qualified_name(self) -> None:
        """Builtins are unqualified; others carry their module."""
        assert qualified_name(dict) == "dict"
        assert qualified_name(Decimal) == "decimal.Decimal"


# ============================================================================
# Dates and Durations
# ============================================================================


class TestDateTimeFormatter:
    """Test Babel-backed date/time rendering."""

    def test_naive_datetime(self) -> None:
        """Whole-second datetimes render without fraction or offset."""
        assert render(datetime(2024, 1, 2, 10, 30)) == "<2024-01-02 10:30:00>"

    def test_fractional_seconds(self) -> None:
        """Microseconds add a six-digit fraction."""
        value = datetime(2024, 1, 2, 10, 30, 0, 500000)

        assert render(value) == "<2024-01-02 10:30:00.500000>"

    def test_aware_datetime_shows_offset(self) -> None:
        """Timezone-aware datetimes render their own UTC offset."""
        value = datetime(2024, 1, 2, 10, 30, tzinfo=timezone(timedelta(hours=1)))

        assert render(value) == "<2024-01-02 10:30:00 +01:00>"

    def test_utc_datetime(self) -> None:
        """UTC renders a zero offset."""
        assert render(datetime(2024, 1, 2, tzinfo=UTC)) == "<2024-01-02 00:00:00 +00:00>"

    def test_date(self) -> None:
        """Dates render without a time part."""
        assert render(date(2024, 12, 31)) == "<2024-12-31>"

    def test_time(self) -> None:
        """Times render without a date part."""
        assert render(time(7, 5, 9)) == "<07:05:09>"


class TestTimeDeltaFormatter:
    """Test duration rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (timedelta(days=1, hours=2, minutes=3, seconds=4), "1d, 2h, 3m and 4s"),
            (timedelta(0), "0s"),
            (timedelta(minutes=5), "5m"),
            (timedelta(hours=1, seconds=30), "1h and 30s"),
            (timedelta(seconds=1, milliseconds=500), "1.5s"),
            (timedelta(microseconds=250), "0.00025s"),
            (-timedelta(hours=1), "-1h"),
        ],
    )
    def test_rendering(self, value: timedelta, expected: str) -> None:
        """Durations list non-zero units joined with 'and'."""
        assert render(value) == expected


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptionFormatter:
    """Test exception rendering."""

    def test_with_message(self) -> None:
        """Exceptions render as 'Type: message'."""
        assert render(ValueError("bad input")) == "ValueError: bad input"

    def test_without_message(self) -> None:
        """An empty message leaves the type name only."""
        assert render(RuntimeError()) == "RuntimeError"

    def test_cause_shown_with_line_breaks(self) -> None:
        """With line breaks, the cause is rendered indented below."""
        error = ValueError("outer")
        error.__cause__ = KeyError("k")

        assert render(error, use_line_breaks=True) == (
            "ValueError: outer\n    Caused by: KeyError: 'k'"
        )

    def test_cause_hidden_on_single_line(self) -> None:
        """Without line breaks, only the exception itself is shown."""
        error = ValueError("outer")
        error.__cause__ = KeyError("k")

        assert render(error) == "ValueError: outer"


# ============================================================================
# Mappings and Collections
# ============================================================================


class TestMappingFormatter:
    """Test mapping rendering."""

    def test_dict(self) -> None:
        """Values are rendered through the chain."""
        assert render({"a": 1, "b": [1, 2]}) == "{'a': 1, 'b': [1, 2]}"

    def test_enum_keys_rendered_in_place(self) -> None:
        """Enum keys render like enum values without taking a nesting level."""
        assert render({Color.RED: 1, Level.LOW: 2}, max_depth=1) == "{Color.RED: 1, Level.LOW: 2}"

    def test_container_keys_rendered_through_chain(self) -> None:
        """Keys that are containers are rendered like any other member."""
        assert render({(1, 2): "pair"}) == "{(1, 2): 'pair'}"

    def test_empty_dict(self) -> None:
        """Empty dicts render as {}."""
        assert render({}) == "{}"

    def test_other_mapping_names_type(self) -> None:
        """Mappings other than dict name their type."""
        assert render(collections.OrderedDict(a=1)) == "OrderedDict({'a': 1})"

    def test_item_cap(self) -> None:
        """max_items caps entries and reports the rest."""
        value = {i: i for i in range(5)}

        assert render(value, max_items=2) == "{0: 0, 1: 1, …3 more…}"

    def test_line_breaks_nest(self) -> None:
        """Nested members are re-indented under their parent."""
        assert render({"a": [1, 2]}, use_line_breaks=True) == (
            "{\n    'a': [\n        1,\n        2\n    ]\n}"
        )


class TestCollectionFormatter:
    """Test collection rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([1, 2, 3], "[1, 2, 3]"),
            ([], "[]"),
            ((1,), "(1,)"),
            ((1, 2), "(1, 2)"),
            ((), "()"),
            ({1}, "{1}"),
            (set(), "set()"),
            (frozenset({1}), "frozenset({1})"),
            (collections.deque([1, 2]), "deque([1, 2])"),
            ([None, "x", [True]], "[None, 'x', [True]]"),
        ],
    )
    def test_rendering(self, value: object, expected: str) -> None:
        """Containers keep their literal delimiters."""
        assert render(value) == expected

    def test_range_left_to_default(self) -> None:
        """Ranges render with repr instead of item by item."""
        assert render(range(3)) == "range(0, 3)"

    def test_max_items_three_of_ten(self) -> None:
        """max_items=3 shows three items and the remaining count."""
        assert render(list(range(10)), max_items=3) == "[0, 1, 2, …7 more…]"

    def test_default_cap_is_32(self) -> None:
        """max_items=0 defers to 32 items."""
        text = render(list(range(40)))

        assert text.endswith(", 31, …8 more…]")

    def test_negative_max_items_uses_default(self) -> None:
        """Negative max_items behaves like 0."""
        assert render(list(range(40)), max_items=-1) == render(list(range(40)))

    def test_exact_fit_has_no_marker(self) -> None:
        """No marker is added when everything fits."""
        assert render([1, 2, 3], max_items=3) == "[1, 2, 3]"

    def test_line_breaks(self) -> None:
        """One item per line, indented by four spaces."""
        assert render([1, 2], use_line_breaks=True) == "[\n    1,\n    2\n]"

    def test_single_tuple_with_line_breaks(self) -> None:
        """A one-item tuple drops the trailing comma in multi-line layout."""
        assert render((1,), use_line_breaks=True) == "(\n    1\n)"

    @given(st.lists(st.integers(), max_size=60), st.integers(min_value=1, max_value=40))
    def test_item_cap_property(self, items: list[int], max_items: int) -> None:
        """At most max_items items are shown; the marker counts the rest."""
        text = render(items, max_items=max_items)

        hidden = len(items) - max_items
        if hidden > 0:
            assert text.endswith(f"…{hidden} more…]")
        else:
            assert text == repr(items)


# ============================================================================
# Objects
# ============================================================================


class TestObjectFormatter:
    """Test member-by-member object rendering."""

    def test_dataclass(self) -> None:
        """Dataclasses render their fields."""
        assert render(Point(1, 2)) == "Point { x = 1, y = 2 }"

    def test_dataclass_repr_false_fields_hidden(self) -> None:
        """Fields excluded from repr are not rendered."""
        assert render(Secretive(1, 2)) == "Secretive { visible = 1 }"

    def test_empty_dataclass(self) -> None:
        """A dataclass without fields renders an empty body."""
        assert render(Empty()) == "Empty {}"

    def test_plain_object_public_attributes(self) -> None:
        """Plain objects show public instance attributes only."""
        assert render(Plain()) == "Plain { a = 1 }"

    def test_custom_repr_wins(self) -> None:
        """Objects defining __repr__ are left to the default formatter."""
        assert render(CustomRepr()) == "CustomRepr!"

    def test_object_without_public_attributes(self) -> None:
        """Objects with nothing to show use the default repr."""
        assert render(Bare()).startswith("<")

    def test_line_breaks(self) -> None:
        """Members go on separate lines with line breaks on."""
        assert render(Point(1, 2), use_line_breaks=True) == "Point {\n    x = 1,\n    y = 2\n}"

    def test_nested(self) -> None:
        """Members are rendered through the chain."""
        assert render([Point(0, 0)]) == "[Point { x = 0, y = 0 }]"


# ============================================================================
# Registry
# ============================================================================


class TestBuiltinRegistry:
    """Test the built-in chain."""

    def test_order(self) -> None:
        """The chain order is fixed and ends with the terminal formatter."""
        assert [type(f) for f in create_builtin_registry()] == [
            NoneFormatter,
            BoolFormatter,
            EnumFormatter,
            StringFormatter,
            BytesFormatter,
            NumberFormatter,
            DateTimeFormatter,
            TimeDeltaFormatter,
            TypeFormatter,
            ExceptionFormatter,
            MappingFormatter,
            CollectionFormatter,
            ObjectFormatter,
            DefaultFormatter,
        ]

    def test_shared_registry_is_frozen_singleton(self) -> None:
        """get_builtin_registry() returns the same frozen instance."""
        shared = get_builtin_registry()

        assert shared is get_builtin_registry()
        assert shared.frozen
        with pytest.raises(TypeError):
            shared.add(DefaultFormatter())

    def test_create_returns_fresh_instances(self) -> None:
        """create_builtin_registry() never shares formatter instances."""
        first, second = create_builtin_registry(), create_builtin_registry()

        assert not first.frozen
        assert all(a is not b for a, b in zip(first, second, strict=True))

    @given(st.from_type(object))
    def test_terminal_accepts_everything(self, value: object) -> None:
        """DefaultFormatter accepts every value."""
        assert DefaultFormatter().can_handle(value)
