from datetime import date


def format_currency(amount: int, symbol: str = 'Rs') -> str:
    return f'{symbol} {amount:,}'


def format_show_date(value: date) -> str:
    """e.g. 'Friday, January 10, 2025'"""
    return f'{value.strftime("%A, %B")} {value.day}, {value.year}'
