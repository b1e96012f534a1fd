"""Number display for axis ticks, tooltips, tables and summary cards."""


def fmt_number(value):
    """Capacity/demand as a whole number with thousands separators ("N/A" for None)."""
    if value is None:
        return "N/A"
    try:
        return f"{round(float(value)):,}"
    except (ValueError, TypeError, OverflowError):
        return str(value)


def fmt_percent(value):
    """Utilization ratio as a percentage, one decimal (0.875 -> "87.5%")."""
    if value is None:
        return "N/A"
    try:
        return f"{float(value) * 100:.1f}%"
    except (ValueError, TypeError):
        return str(value)
