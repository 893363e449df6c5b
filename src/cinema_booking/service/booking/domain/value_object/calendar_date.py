from datetime import date, datetime


def parse_calendar_date(value: str | date) -> date:
    """Accept '2025-01-10' as well as full ISO timestamps such as '2025-01-10T00:00:00.000Z'"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if 'T' in value:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
    return date.fromisoformat(value)
