"""Built-in value formatters.

The built-in chain is consulted after the scoped and the process-wide custom
formatters. It ends with DefaultFormatter, which accepts every value, so
resolution against the built-in chain always succeeds.

Date and time values are rendered through Babel with fixed CLDR patterns in
FORMATTING_LOCALE, so failure messages look the same on every machine.

Python 3.13+.
"""

import dataclasses
import enum
import itertools
import numbers
from collections.abc import Collection, Iterable, Mapping
from datetime import date, datetime, time, timedelta

from babel.dates import format_date, format_datetime, format_time

from assertfmt.constants import (
    COLLECTION_MAX_ITEMS,
    FORMATTING_LOCALE,
    INDENT,
    PLACEHOLDER_MORE_ITEMS,
)

from .context import FormattingContext
from .protocols import FormatChild
from .registry import FormatterRegistry
from .text import indent

__all__ = [
    "BoolFormatter",
    "BytesFormatter",
    "CollectionFormatter",
    "DateTimeFormatter",
    "DefaultFormatter",
    "EnumFormatter",
    "ExceptionFormatter",
    "MappingFormatter",
    "NoneFormatter",
    "NumberFormatter",
    "ObjectFormatter",
    "StringFormatter",
    "TimeDeltaFormatter",
    "TypeFormatter",
    "create_builtin_registry",
    "get_builtin_registry",
    "qualified_name",
]

# CLDR patterns; see https://unicode.org/reports/tr35/tr35-dates.html
DATE_PATTERN = "yyyy-MM-dd"
TIME_PATTERN = "HH:mm:ss"
FRACTION_PATTERN = ".SSSSSS"
OFFSET_PATTERN = " xxx"


def qualified_name(cls: type) -> str:
    """Dotted name of a class; builtins are left unqualified.

    Example:
        >>> qualified_name(int)
        'int'
        >>> from collections import OrderedDict
        >>> qualified_name(OrderedDict)
        'collections.OrderedDict'
    """
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", cls.__name__)
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def item_limit(context: FormattingContext) -> int:
    """Items a collection formatter shows: max_items when positive, else the default."""
    return context.max_items if context.max_items > 0 else COLLECTION_MAX_ITEMS


def join_members(
    opening: str,
    members: list[str],
    closing: str,
    context: FormattingContext,
    separator: str = ", ",
) -> str:
    """Join rendered members between delimiters, one per line with line breaks on."""
    if not members:
        return f"{opening}{closing}"
    if not context.use_line_breaks:
        return f"{opening}{separator.join(members)}{closing}"
    body = ",\n".join(indent(member, INDENT) for member in members)
    return f"{opening.rstrip()}\n{body}\n{closing.lstrip()}"


def _more_items(total: int, shown: int) -> list[str]:
    hidden = total - shown
    return [PLACEHOLDER_MORE_ITEMS.format(count=hidden)] if hidden > 0 else []


# ============================================================================
# ATOMIC VALUES
# ============================================================================


class NoneFormatter:
    """Renders None."""

    def can_handle(self, value: object) -> bool:
        return value is None

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return "None"


class BoolFormatter:
    """Renders True and False."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, bool)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return "True" if value else "False"


class EnumFormatter:
    """Renders enum members as ``Type.NAME``."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, enum.Enum)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, enum.Enum)
        if value.name is None:
            return repr(value)
        return f"{type(value).__name__}.{value.name}"


class StringFormatter:
    """Renders strings quoted, with escapes."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, str)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return repr(value)


class BytesFormatter:
    """Renders bytes and bytearray values with their literal syntax."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, (bytes, bytearray))

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return repr(value)


class NumberFormatter:
    """Renders numbers with repr, so Decimal('1.5') and 1.5 stay distinguishable."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, numbers.Number)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return repr(value)


class DateTimeFormatter:
    """Renders datetime, date and time values as ``<2024-01-02 10:30:00>``.

    Fractional seconds are appended when the value has microseconds and the
    UTC offset when the value is timezone-aware.
    """

    def can_handle(self, value: object) -> bool:
        return isinstance(value, (datetime, date, time))

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        if isinstance(value, datetime):
            pattern = f"{DATE_PATTERN} {self._time_pattern(value)}"
            text = format_datetime(value, pattern, locale=FORMATTING_LOCALE)
        elif isinstance(value, date):
            text = format_date(value, DATE_PATTERN, locale=FORMATTING_LOCALE)
        else:
            assert isinstance(value, time)
            text = format_time(value, self._time_pattern(value), locale=FORMATTING_LOCALE)
        return f"<{text}>"

    @staticmethod
    def _time_pattern(value: datetime | time) -> str:
        pattern = TIME_PATTERN
        if value.microsecond:
            pattern += FRACTION_PATTERN
        if value.tzinfo is not None and value.utcoffset() is not None:
            pattern += OFFSET_PATTERN
        return pattern


class TimeDeltaFormatter:
    """Renders durations as ``1d, 2h, 3m and 4s``."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, timedelta)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, timedelta)
        sign = "-" if value < timedelta(0) else ""
        duration = abs(value)
        hours, remainder = divmod(duration.seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        parts = []
        if duration.days:
            parts.append(f"{duration.days}d")
        if hours:
            parts.append(f"{hours}h")
        if minutes:
            parts.append(f"{minutes}m")
        if duration.microseconds:
            fraction = f"{duration.microseconds:06d}".rstrip("0")
            parts.append(f"{seconds}.{fraction}s")
        elif seconds or not parts:
            parts.append(f"{seconds}s")

        if len(parts) == 1:
            return sign + parts[0]
        return sign + ", ".join(parts[:-1]) + " and " + parts[-1]


class TypeFormatter:
    """Renders classes by their qualified name."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, type)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, type)
        return qualified_name(value)


# ============================================================================
# COMPOSITE VALUES
# ============================================================================


class ExceptionFormatter:
    """Renders exceptions as ``ValueError: message``.

    With line breaks on, an explicit ``__cause__`` is rendered below the
    exception, indented.
    """

    def can_handle(self, value: object) -> bool:
        return isinstance(value, BaseException)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, BaseException)
        name = qualified_name(type(value))
        message = str(value)
        text = f"{name}: {message}" if message else name
        if context.use_line_breaks and value.__cause__ is not None:
            cause = format_child(".__cause__", value.__cause__)
            text += "\n" + indent(f"Caused by: {cause}", INDENT)
        return text


_ATOMIC_KEY_TYPES = (str, int, float, bool, bytes, type(None))


def _atomic_key_text(key: object) -> str | None:
    """Text of a key that renders without recursion, else None.

    Exact built-in types only: a subclass may override __repr__.
    """
    if type(key) in _ATOMIC_KEY_TYPES:
        return repr(key)
    if isinstance(key, enum.Enum) and key.name is not None:
        return f"{type(key).__name__}.{key.name}"
    return None


class MappingFormatter:
    """Renders mappings as ``{key: value, ...}``.

    Atomic keys (strings, numbers, None, enum members) are rendered in place
    and do not count as a nesting level; only values, and keys that are
    themselves objects or containers, go through format_child.
    """

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Mapping)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, Mapping)
        limit = item_limit(context)
        members = []
        for index, (key, item) in enumerate(itertools.islice(value.items(), limit)):
            key_text = _atomic_key_text(key)
            if key_text is None:
                key_text = format_child(f".keys()[{index}]", key)
                item_text = format_child(f".values()[{index}]", item)
            else:
                item_text = format_child(f"[{key_text}]", item)
            members.append(f"{key_text}: {item_text}")
        members.extend(_more_items(len(value), len(members)))

        if type(value) is dict:
            return join_members("{", members, "}", context)
        return join_members(f"{type(value).__name__}({{", members, "})", context)


class CollectionFormatter:
    """Renders lists, tuples, sets and other sized containers item by item.

    Strings, bytes and ranges are left to the formatters handling them.
    """

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Collection) and not isinstance(
            value, (str, bytes, bytearray, memoryview, range)
        )

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, Collection)
        limit = item_limit(context)
        members = [
            format_child(f"[{index}]", item)
            for index, item in enumerate(itertools.islice(value, limit))
        ]
        members.extend(_more_items(len(value), len(members)))
        opening, closing = self._delimiters(value, len(members), context.use_line_breaks)
        return join_members(opening, members, closing, context)

    @staticmethod
    def _delimiters(value: Iterable[object], count: int, use_line_breaks: bool) -> tuple[str, str]:
        match value:
            case list():
                return "[", "]"
            case tuple() if count == 1 and not use_line_breaks:
                return "(", ",)"
            case tuple():
                return "(", ")"
            case set() if type(value) is set:
                return ("{", "}") if count else ("set(", ")")
            case frozenset() if type(value) is frozenset:
                return ("frozenset({", "})") if count else ("frozenset(", ")")
            case _:
                return f"{type(value).__name__}([", "])"


class ObjectFormatter:
    """Renders dataclasses and plain objects member by member.

    Plain objects qualify when they have public instance attributes and do
    not define their own ``__repr__``.

    Example:
        Point { x = 1, y = 2 }
    """

    def can_handle(self, value: object) -> bool:
        if isinstance(value, type):
            return False
        if dataclasses.is_dataclass(value):
            return True
        if type(value).__repr__ is not object.__repr__:
            return False
        return bool(self._public_attributes(value))

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        if dataclasses.is_dataclass(value):
            attributes = [
                (field.name, getattr(value, field.name))
                for field in dataclasses.fields(value)
                if field.repr
            ]
        else:
            attributes = self._public_attributes(value)

        members = [f"{name} = {format_child(f'.{name}', member)}" for name, member in attributes]
        name = type(value).__qualname__
        if not members:
            return f"{name} {{}}"
        return join_members(f"{name} {{ ", members, " }", context)

    @staticmethod
    def _public_attributes(value: object) -> list[tuple[str, object]]:
        attributes = getattr(value, "__dict__", None)
        if not isinstance(attributes, dict):
            return []
        return [(name, member) for name, member in attributes.items() if not name.startswith("_")]


class DefaultFormatter:
    """Terminal formatter: renders any value with repr."""

    def can_handle(self, value: object) -> bool:
        return True

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        return repr(value)


# ============================================================================
# REGISTRY
# ============================================================================


def create_builtin_registry() -> FormatterRegistry:
    """Create a new, unfrozen registry holding the built-in formatter chain.

    Each call returns fresh formatter instances. Use it to build a modified
    built-in chain for a Formatter:

    Example:
        >>> registry = create_builtin_registry()
        >>> registry.add(MyFormatter(), first=True)
        >>> formatter = Formatter(builtins=registry)
    """
    registry = FormatterRegistry()
    for formatter in (
        NoneFormatter(),
        BoolFormatter(),
        EnumFormatter(),
        StringFormatter(),
        BytesFormatter(),
        NumberFormatter(),
        DateTimeFormatter(),
        TimeDeltaFormatter(),
        TypeFormatter(),
        ExceptionFormatter(),
        MappingFormatter(),
        CollectionFormatter(),
        ObjectFormatter(),
        DefaultFormatter(),
    ):
        registry.add(formatter)
    return registry


# Initialized lazily on first access to avoid import-time side effects.
_BUILTIN_REGISTRY: FormatterRegistry | None = None


def get_builtin_registry() -> FormatterRegistry:
    """Get the shared, frozen built-in formatter chain.

    Raises:
        TypeError: On add() or remove(); use create_builtin_registry() or
            copy() for a mutable chain.
    """
    global _BUILTIN_REGISTRY  # noqa: PLW0603
    if _BUILTIN_REGISTRY is None:
        _BUILTIN_REGISTRY = create_builtin_registry()
        _BUILTIN_REGISTRY.freeze()
    return _BUILTIN_REGISTRY
