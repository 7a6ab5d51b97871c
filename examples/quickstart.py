"""Quickstart example for assertfmt.

This example demonstrates rendering values for failure messages and
adjusting the rendering per scope.

Note: Examples ignore the 'errors' return value of format_value() where it
is not the point of the example. Tooling should log or report them.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from assertfmt import FormattingScope, format_value, get_default_options, to_string


@dataclass
class Order:
    id: int
    items: list[str]
    placed: datetime


order = Order(id=7, items=["apple", "pear"], placed=datetime(2024, 1, 2, 10, 30))

# Example 1: Rendering values
print("=" * 50)
print("Example 1: Rendering Values")
print("=" * 50)

print(to_string(order))
# Output: Order { id = 7, items = ['apple', 'pear'], placed = <2024-01-02 10:30:00> }

print(to_string(timedelta(hours=1, minutes=5)))
# Output: 1h and 5m

# Example 2: Line breaks
print("\n" + "=" * 50)
print("Example 2: Line Breaks")
print("=" * 50)

print(to_string(order, use_line_breaks=True))
# Output:
# Order {
#     id = 7,
#     items = [
#         'apple',
#         'pear'
#     ],
#     placed = <2024-01-02 10:30:00>
# }

# Example 3: Item and depth limits in a scope
print("\n" + "=" * 50)
print("Example 3: Scoped Limits")
print("=" * 50)

with FormattingScope(max_items=3, max_depth=1):
    print(to_string(list(range(10))))
    # Output: [0, 1, 2, …7 more…]
    print(to_string({"a": {"b": 1}}))
    # Output: {'a': {'b': {Maximum recursion depth of 1 was reached}}}

print(to_string(list(range(5))))
# Output: [0, 1, 2, 3, 4]  (scope limits are gone)

# Example 4: Cycles and collected errors
print("\n" + "=" * 50)
print("Example 4: Cycles")
print("=" * 50)

items: list[object] = [1]
items.append(items)
text, errors = format_value(items)
print(text)
# Output: [1, {Cyclic reference to type list detected}]
for error in errors:
    print(f"  {type(error).__name__}: {error.diagnostic.message if error.diagnostic else error}")

# Example 5: Process-wide defaults
print("\n" + "=" * 50)
print("Example 5: Defaults")
print("=" * 50)

get_default_options().max_items = 2
print(to_string(["a", "b", "c"]))
# Output: ['a', 'b', …1 more…]
