import pytest

from agendamed.config import env_flag


@pytest.mark.parametrize("value", ["0", "false", "False", "NO", "off", " Off "])
def test_env_flag_off(monkeypatch, value):
    monkeypatch.setenv("SEED_DOCTORS", value)
    assert env_flag("SEED_DOCTORS") is False


@pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
def test_env_flag_on(monkeypatch, value):
    monkeypatch.setenv("SEED_DOCTORS", value)
    assert env_flag("SEED_DOCTORS") is True


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("SEED_DOCTORS", raising=False)
    assert env_flag("SEED_DOCTORS") is True
    assert env_flag("SEED_DOCTORS", default="0") is False
