"""A counter that moves up and down but stays inside a closed range."""

from __future__ import annotations


class Counter:
    """An integer counter clamped to ``[range_low, range_high]``."""

    def __init__(self, init_value: int = 0, range_low: int = 0, range_high: int = 100) -> None:
        if not range_low <= init_value <= range_high:
            raise ValueError(
                f"initial value {init_value} is outside [{range_low}, {range_high}]"
            )
        self._init_value = init_value
        self._range_low = range_low
        self._range_high = range_high
        self._value = init_value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value}, "
            f"range=[{self._range_low}, {self._range_high}])"
        )

    @property
    def value(self) -> int:
        """The current value."""
        return self._value

    def increment(self) -> bool:
        """Increase by one unless at the upper bound; return whether it moved."""
        if self._value < self._range_high:
            self._value += 1
            return True
        return False

    def decrement(self) -> bool:
        """Decrease by one unless at the lower bound; return whether it moved."""
        if self._value > self._range_low:
            self._value -= 1
            return True
        return False

    def reset(self) -> None:
        """Return to the initial value."""
        self._value = self._init_value