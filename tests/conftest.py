import sqlite3

import pytest

from agendamed import create_app
from agendamed.db import init_db
from agendamed.models import NewUser


def make_user(**overrides) -> NewUser:
    data = dict(
        username="joana",
        password="segredo",
        name="Joana Magalhães Souza",
        email="joana@example.com",
        endereco="Rua das Flores",
        numero="10",
        complemento="Apto 2",
        cep="17500000",
        telefone="14999990000",
        plano="Unimed",
    )
    data.update(overrides)
    return NewUser(**data)


@pytest.fixture
def db(tmp_path):
    """Banco vazio (sem os médicos padrão)."""
    handle = init_db(str(tmp_path / "test.db"), seed=False)
    yield handle
    handle.close()


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "DATABASE_PATH": str(tmp_path / "app.db"),
    })
    yield app
    app.extensions["agendamed.db"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def new_user():
    return make_user


class CommitFails:
    """Conexão que repassa tudo para a real, mas falha no commit."""

    def __init__(self, conn):
        self._conn = conn

    def __getattr__(self, name):
        return getattr(self._conn, name)

    def commit(self):
        raise sqlite3.OperationalError("disk I/O error")


class StoreDown:
    """Conexão que falha em qualquer cursor aberto."""

    def __init__(self, conn):
        self._conn = conn

    def __getattr__(self, name):
        return getattr(self._conn, name)

    def cursor(self):
        raise sqlite3.OperationalError("database is locked")
