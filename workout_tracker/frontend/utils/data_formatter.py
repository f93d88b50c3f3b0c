"""
Data Formatting Utilities
========================

Formatting of workout values for display in the workout list and map popups.
Numbers are rendered the way the browser renders them so a value reads the
same before and after a reload.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from ...storage.data_models import RUNNING

WORKOUT_EMOJI = {
    'running': '🏃‍♂️',
    'cycling': '🚴‍♀️',
}


class DataFormatter:
    """
    Utility class for formatting workout data for display.

    Provides methods for:
    - Plain number display (integral values without a decimal point)
    - Fixed one-decimal display of derived metrics
    - Workout type emoji
    """

    def format_number(self, value: float) -> str:
        """
        Format a number the way JavaScript's String(value) does.

        Args:
            value: Number to display

        Returns:
            '5' for 5.0, '5.5' for 5.5, '0.000001' for 1e-6, '1e-7' for 1e-7,
            'NaN' / 'Infinity' for non-finite values
        """
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"

        # Shortest round-trip digits, laid out by the ECMAScript Number::toString rules
        sign, digit_tuple, exponent = Decimal(repr(float(value))).as_tuple()
        digits = "".join(map(str, digit_tuple)).rstrip("0") or "0"
        k = len(digits)
        n = exponent + len(digit_tuple)
        prefix = "-" if sign else ""

        if k <= n <= 21:
            return prefix + digits + "0" * (n - k)
        if 0 < n <= 21:
            return prefix + digits[:n] + "." + digits[n:]
        if -6 < n <= 0:
            return prefix + "0." + "0" * -n + digits

        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        power = n - 1
        return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"

    def format_fixed(self, value: float, digits: int = 1) -> str:
        """
        Format a number with a fixed number of decimals, rounding half away
        from zero like JavaScript's toFixed.

        Args:
            value: Number to display
            digits: Decimal places

        Returns:
            Formatted number string
        """
        if not math.isfinite(value) or abs(value) >= 1e21:
            return self.format_number(value)

        if value == 0:
            value = 0.0  # toFixed drops the sign of negative zero
        quantum = Decimal(1).scaleb(-digits)
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

    def workout_emoji(self, workout_type: str) -> str:
        """Emoji shown for a workout type."""
        return WORKOUT_EMOJI[RUNNING] if workout_type == RUNNING else WORKOUT_EMOJI['cycling']
