# agendamed/db.py
import logging
import sqlite3
import threading
from contextlib import contextmanager

from flask import current_app

from .errors import DataAccessError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    endereco TEXT NOT NULL,
    numero TEXT NOT NULL,
    complemento TEXT,
    cep TEXT NOT NULL,
    telefone TEXT,
    plano TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS doctors (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    specialty TEXT NOT NULL,
    location TEXT NOT NULL,
    email TEXT UNIQUE,
    phone TEXT,
    available BOOLEAN DEFAULT 1
);

CREATE TABLE IF NOT EXISTS appointments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    doctor_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    date TEXT NOT NULL,
    status TEXT NOT NULL,
    FOREIGN KEY (doctor_id) REFERENCES doctors (id),
    FOREIGN KEY (user_id) REFERENCES users (id)
);

CREATE TABLE IF NOT EXISTS medical_records (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    record TEXT NOT NULL,
    FOREIGN KEY (user_id) REFERENCES users (id)
);
"""

# médicos padrão; o email UNIQUE faz o OR IGNORE não duplicar a cada start
SEED_DOCTORS = [
    ("Dr. João Silva", "Cardiologista", "Rua das Flores, 123", "joao.silva@example.com", "14987654321", 1),
    ("Dr. Maria Souza", "Pediatra", "Rua das Palmeiras, 456", "maria.souza@example.com", "14987654322", 1),
    ("Dr. Carlos Pereira", "Dermatologista", "Rua dos Anéis, 789", "carlos.pereira@example.com", "14987654323", 1),
]


def _dict_factory(cursor, row):
    # rows acessíveis por nome, como dict simples
    return {col[0]: row[i] for i, col in enumerate(cursor.description)}


class Database:
    """
    Handle da conexão SQLite. Criado por init_db() e repassado
    explicitamente para repositórios e serviços.

    Uso:
      with db.get_conn() as conn:
          conn.execute("SELECT 1")
    Faz commit no sucesso e rollback em caso de exceção. Chamadas
    aninhadas (ex.: dentro de db.transaction()) entram na transação
    externa, que é quem decide commit/rollback.
    """

    def __init__(self, conn: sqlite3.Connection, path: str = ":memory:"):
        self.path = path
        self._conn = conn
        self._lock = threading.RLock()
        self._depth = 0

    @contextmanager
    def get_conn(self):
        if self._conn is None:
            raise RuntimeError("Conexão já foi fechada. Chame init_db() novamente.")
        with self._lock:
            self._depth += 1
            outermost = self._depth == 1
            try:
                yield self._conn
                if outermost:
                    self._conn.commit()
            except Exception:
                if outermost:
                    self._conn.rollback()
                raise
            finally:
                self._depth -= 1

    @contextmanager
    def get_cursor(self):
        with self.get_conn() as conn:
            cur = conn.cursor()
            try:
                yield cur
            finally:
                cur.close()

    def transaction(self):
        """
        Agrupa várias operações num único commit:
          with db.transaction():
              users.register(...)
        """
        return self.get_conn()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


def create_schema(db: Database, seed: bool = True) -> None:
    with db.get_cursor() as cur:
        cur.executescript(SCHEMA)
        if not seed:
            return
        cur.executemany(
            """
            INSERT OR IGNORE INTO doctors (name, specialty, location, email, phone, available)
            VALUES (?, ?, ?, ?, ?, ?);
            """,
            SEED_DOCTORS,
        )


def init_db(path: str, seed: bool = True) -> Database:
    """
    Abre (ou cria) o arquivo do banco, garante as quatro tabelas e os
    médicos padrão, e devolve o handle pronto para uso.
    """
    try:
        conn = sqlite3.connect(path, check_same_thread=False)
    except sqlite3.Error as e:
        logger.exception("Error opening database %s", path)
        raise DataAccessError("Falha ao abrir o banco de dados") from e

    conn.row_factory = _dict_factory
    db = Database(conn, path)
    try:
        create_schema(db, seed)
    except sqlite3.Error as e:
        db.close()
        logger.exception("Error initializing database %s", path)
        raise DataAccessError("Falha ao inicializar o banco de dados") from e

    logger.info("Database ready at %s", path)
    return db


def get_db() -> Database:
    """Handle registrado por create_app(); só vale dentro do app context."""
    return current_app.extensions["agendamed.db"]
