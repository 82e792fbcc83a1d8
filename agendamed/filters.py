# agendamed/filters.py
from datetime import date, datetime


def brdate(value):
    """Formata datas no padrão dd/mm/aaaa (com HH:MM quando houver hora).
    Aceita date/datetime ou string ISO; devolve o valor original se não
    conseguir ler."""
    if not value:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    s = str(value)
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return s
    if len(s) <= 10:
        return dt.strftime("%d/%m/%Y")
    return dt.strftime("%d/%m/%Y %H:%M")


def register_filters(app):
    app.jinja_env.filters["brdate"] = brdate
