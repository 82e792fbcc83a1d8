from datetime import date, datetime

from agendamed.filters import brdate


def test_brdate():
    assert brdate("2026-10-19") == "19/10/2026"
    assert brdate("2026-10-19T14:30") == "19/10/2026 14:30"
    assert brdate(date(2026, 1, 5)) == "05/01/2026"
    assert brdate(datetime(2026, 1, 5, 8, 0)) == "05/01/2026 08:00"
    assert brdate(None) == ""
    assert brdate("sem data") == "sem data"
