"""Display formatting for product values."""
from datetime import datetime

from app.constants.dashboard import StockStatus


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_number(num) -> str:
    if isinstance(num, float) and not num.is_integer():
        return f"{num:,.3f}".rstrip("0").rstrip(".")
    return f"{int(num):,}"


def format_date(date_string: str) -> str:
    """
    Format an ISO 8601 timestamp as ``Jan 5, 2025, 02:30 PM``.

    Unparseable input is returned unchanged.
    """
    try:
        value = datetime.fromisoformat(date_string.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return date_string
    return (f"{value.strftime('%b')} {value.day}, {value.year}, "
            f"{value.strftime('%I:%M %p')}")


def stock_status_color(stock_quantity: int) -> str:
    if stock_quantity == 0:
        return StockStatus.COLOR_ERROR
    if stock_quantity < StockStatus.LOW_STOCK_THRESHOLD:
        return StockStatus.COLOR_WARNING
    return StockStatus.COLOR_SUCCESS


def stock_status_label(stock_quantity: int) -> str:
    if stock_quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if stock_quantity < StockStatus.LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
