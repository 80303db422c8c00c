"""Render numbers the way a screen reader should announce them.

Uses Babel (CLDR data) for digit grouping, currency formatting and the
ordinal plural category, so 11th/12th/13th come out right without any
mod-10 arithmetic.
"""

from babel import Locale
from babel.numbers import format_currency, format_decimal

DEFAULT_LOCALE = 'en_US'

ORDINAL_SUFFIXES = {
    'one': 'st',
    'two': 'nd',
    'few': 'rd',
    'other': 'th',
}


def _plain(num: float) -> str:
    """Print 5.0 as '5', keep 2.5 as '2.5'."""
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def format_number_for_screen_reader(
    num: float,
    *,
    currency: str | None = None,
    percentage: bool = False,
    ordinal: bool = False,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format num for assistive technology.

    Precedence when several modes are set: currency, percentage, ordinal.
    With none set, the number is grouped per locale ('1,500,000').
    """
    if currency:
        return format_currency(num, currency, locale=locale)

    if percentage:
        return f'{_plain(num)} percent'

    if ordinal:
        category = Locale.parse(locale).ordinal_form(num)
        return f'{_plain(num)}{ORDINAL_SUFFIXES.get(category, "th")}'

    return format_decimal(num, locale=locale)
