from datetime import date


def format_number(value: float) -> str:
    """Render a number the way the browser form echoes it: ``1000``, ``1000.5``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_weight(value: float) -> str:
    return f"{value:.2f}"


def format_long_date(value: date) -> str:
    # en-US long form, e.g. "Tuesday, October 20, 2026"
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"
