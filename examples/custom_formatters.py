"""Custom formatter examples for assertfmt.

Demonstrates:
1. A process-wide formatter for a domain type
2. A scoped formatter overriding it inside one scope only
3. A formatter rendering members through format_child
4. What happens when a formatter raises

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from assertfmt import (
    FormatChild,
    FormattingContext,
    FormattingScope,
    add_custom_formatter,
    format_value,
    remove_custom_formatter,
    to_string,
)


class Money:
    def __init__(self, amount: Decimal, currency: str) -> None:
        self.amount = amount
        self.currency = currency


class Basket:
    def __init__(self, *prices: Money) -> None:
        self.prices = list(prices)


class MoneyFormatter:
    """Renders Money as '12.50 EUR'."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Money)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, Money)
        return f"{value.amount} {value.currency}"


class CentsFormatter:
    """Renders Money as integer cents."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Money)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, Money)
        return f"{int(value.amount * 100)}c"


class BasketFormatter:
    """Renders a Basket by delegating each price back to the chain."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Basket)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        assert isinstance(value, Basket)
        prices = [format_child(f".prices[{i}]", price) for i, price in enumerate(value.prices)]
        separator = "\n  + " if context.use_line_breaks else " + "
        return "Basket(" + separator.join(prices) + ")"


class FlakyFormatter:
    """Accepts Money, then fails."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, Money)

    def format(self, value: object, context: FormattingContext, format_child: FormatChild) -> str:
        msg = "exchange rate service unavailable"
        raise ConnectionError(msg)


if __name__ == "__main__":
    money_formatter = MoneyFormatter()
    basket = Basket(Money(Decimal("12.50"), "EUR"), Money(Decimal("3.00"), "EUR"))

    print("=" * 50)
    print("Example 1: Process-wide Formatter")
    print("=" * 50)
    add_custom_formatter(money_formatter)
    add_custom_formatter(BasketFormatter())
    print(to_string(basket))
    # Output: Basket(12.50 EUR + 3.00 EUR)

    print("\n" + "=" * 50)
    print("Example 2: Scoped Override")
    print("=" * 50)
    with FormattingScope() as options:
        options.add_formatter(CentsFormatter())
        print(to_string(basket))
        # Output: Basket(1250c + 300c)
    print(to_string(basket))
    # Output: Basket(12.50 EUR + 3.00 EUR)

    print("\n" + "=" * 50)
    print("Example 3: Faulty Formatter")
    print("=" * 50)
    with FormattingScope() as options:
        options.add_formatter(FlakyFormatter())
        text, errors = format_value(basket)
        print(text)
        # Output: Basket(<could not format value of type Money: ConnectionError> + ...)
        for error in errors:
            print(error)

    remove_custom_formatter(money_formatter)
