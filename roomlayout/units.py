"""Unit conversion for reports.

The engine works in centimetres throughout; these helpers only convert
values for display and for reading user input in other units.
"""

CM_PER_UNIT = {
    'cm': 1.0,
    'm': 100.0,
    'in': 2.54,
    'ft': 30.48,
}

# Decimal places shown per unit
PRECISION = {
    'cm': 0,
    'm': 2,
    'in': 1,
    'ft': 2,
}


def _check_unit(unit):
    if unit not in CM_PER_UNIT:
        raise ValueError(f"Unknown unit {unit!r}, expected one of {', '.join(CM_PER_UNIT)}")


def convert_from_cm(cm: float, unit: str) -> float:
    _check_unit(unit)
    return cm / CM_PER_UNIT[unit]


def convert_to_cm(value: float, unit: str) -> float:
    _check_unit(unit)
    return value * CM_PER_UNIT[unit]


def format_measurement(cm: float, unit: str = 'cm') -> str:
    """Format a length in the given unit, e.g. '1.20m'"""
    value = convert_from_cm(cm, unit)
    digits = PRECISION[unit]
    if digits == 0:
        return f"{round(value)}{unit}"
    return f"{value:.{digits}f}{unit}"


def format_dimensions(width_cm: float, height_cm: float, unit: str = 'cm') -> str:
    """Format 'width × height' in the given unit"""
    return f"{format_measurement(width_cm, unit)} × {format_measurement(height_cm, unit)}"
