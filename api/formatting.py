"""
French (fr-FR) display formatting shared by models and the dashboard.
"""
from decimal import ROUND_HALF_UP, Decimal

from django.utils import timezone

# fr-FR separators: narrow no-break space between thousands groups,
# no-break space before the currency symbol
GROUP_SEPARATOR = '\u202f'
CURRENCY_SPACE = '\xa0'


def format_number(value):
    """
    Compact a count: 1200 -> '1.2K', 3400000 -> '3.4M', 999 -> '999'.
    """
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    elif value >= 1000:
        return f"{value / 1000:.1f}K"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def group_thousands(digits):
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return GROUP_SEPARATOR.join(groups)


def format_currency(amount, symbol='€', decimals=2):
    """
    Format an amount the way fr-FR formats currencies: '5 801,25 €'.

    Comma decimal separator, narrow no-break space between thousands
    groups and a no-break space before the symbol.
    """
    exponent = Decimal(1).scaleb(-decimals)
    quantized = Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)
    sign = '-' if quantized < 0 else ''
    text = f"{abs(quantized):.{decimals}f}"
    if decimals:
        integer_part, fraction = text.split('.')
        number = f"{group_thousands(integer_part)},{fraction}"
    else:
        number = group_thousands(text)
    return f"{sign}{number}{CURRENCY_SPACE}{symbol}"


def format_percent_change(change, decimals=0):
    """Signed percentage: 12.4 -> '+12%', -3 -> '-3%'."""
    sign = '+' if change >= 0 else ''
    return f"{sign}{change:.{decimals}f}%"


def time_ago(created_at, now):
    """
    Relative French label for how long ago `created_at` was.

    'À l'instant', '5min', '3h', '2j', '3sem', then the date as dd/mm/YYYY
    in the current time zone.
    """
    minutes = int((now - created_at).total_seconds() // 60)
    if minutes < 1:
        return "À l'instant"
    if minutes < 60:
        return f"{minutes}min"

    hours = minutes // 60
    if hours < 24:
        return f"{hours}h"

    days = hours // 24
    if days < 7:
        return f"{days}j"

    weeks = days // 7
    if weeks < 4:
        return f"{weeks}sem"

    return timezone.localtime(created_at).strftime('%d/%m/%Y')
