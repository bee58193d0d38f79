"""Observable holder for the current weight."""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable


ChangeHandler = Callable[[Any], None]


def round_to_tenth(value: float) -> float:
    """
    Round to one decimal place, halves away from zero.

    Rounds the shortest decimal repr of the float, so 70.05 -> 70.1 and
    82.39999999999999 (82.3 + 0.1) -> 82.4.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    # already at tenth granularity, incl. huge values quantize cannot hold
    if exact.as_tuple().exponent >= -1:
        return value
    return float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class ValueCell:
    """Single value plus the handlers to call when it changes.

    Holds whatever the view put in it: None before the first load, a float
    after a load or step, or raw text after a direct edit.
    """

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._handlers: list[ChangeHandler] = []

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def set(self, value: Any) -> None:
        """Store value; handlers run only when it differs from the old one."""
        old = self._value
        self._value = value
        if old == value and type(old) is type(value):
            return
        for handler in list(self._handlers):
            handler(value)

    def subscribe(self, handler: ChangeHandler) -> Callable[[], None]:
        """
        Register a change handler.

        Returns:
            Callable that removes the handler again
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe
