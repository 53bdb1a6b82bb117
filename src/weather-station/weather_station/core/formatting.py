"""Number rendering shared by every text output."""


def format_number(value: float) -> str:
    """Render value in general format with six significant digits.

    Whole numbers drop their fractional part: 25.0 -> "25", -5.0 -> "-5".
    """
    return format(value, "g")
