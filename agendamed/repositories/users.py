# agendamed/repositories/users.py
import logging
from typing import Optional, List, Dict, Any

from ..db import Database
from ..errors import store_errors

logger = logging.getLogger(__name__)

USER_COLUMNS = [
    "username", "password", "name", "email",
    "endereco", "numero", "complemento", "cep", "telefone", "plano",
]


class UserRepository:
    def __init__(self, db: Database):
        self.db = db

    @store_errors("Falha ao registrar usuário")
    def register(
        self,
        username: str,
        password: str,
        name: str,
        email: str,
        endereco: str,
        numero: str,
        complemento: Optional[str],
        cep: str,
        telefone: Optional[str],
        plano: str,
    ) -> int:
        """
        Insere o usuário e devolve o id gerado. Username repetido cai no
        UNIQUE do banco e sai como falha genérica de registro.
        """
        sql = """
            INSERT INTO users (
              username, password, name, email,
              endereco, numero, complemento, cep, telefone, plano
            )
            VALUES (
              :username, :password, :name, :email,
              :endereco, :numero, :complemento, :cep, :telefone, :plano
            );
        """
        params = {
            "username": username,
            "password": password,
            "name": name,
            "email": email,
            "endereco": endereco,
            "numero": numero,
            "complemento": complemento,
            "cep": cep,
            "telefone": telefone,
            "plano": plano,
        }
        with self.db.get_cursor() as cur:
            cur.execute(sql, params)
            user_id = cur.lastrowid
        logger.info("User %s registered", user_id)
        return user_id

    @store_errors("Erro ao logar no usuário")
    def login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        # comparação exata, sem hash
        with self.db.get_cursor() as cur:
            cur.execute(
                "SELECT * FROM users WHERE username = ? AND password = ? LIMIT 1;",
                (username, password),
            )
            return cur.fetchone()

    @store_errors("Erro ao buscar usuários")
    def fetch_all(self) -> List[Dict[str, Any]]:
        with self.db.get_cursor() as cur:
            cur.execute("SELECT * FROM users;")
            return cur.fetchall()

    @store_errors("Erro ao buscar usuários")
    def by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        with self.db.get_cursor() as cur:
            cur.execute("SELECT * FROM users WHERE id = ?;", (user_id,))
            return cur.fetchone()

    @store_errors("Erro ao atualizar usuário")
    def update(self, user_id: int, updates: Dict[str, Any]) -> int:
        """Regrava todas as colunas; as ausentes em `updates` viram NULL."""
        set_clause = ", ".join(f"{c} = :{c}" for c in USER_COLUMNS)
        sql = f"UPDATE users SET {set_clause} WHERE id = :id;"
        payload = {c: updates.get(c) for c in USER_COLUMNS}
        payload["id"] = user_id
        with self.db.get_cursor() as cur:
            cur.execute(sql, payload)
            return cur.rowcount

    @store_errors("Erro ao deletar usuário")
    def delete(self, user_id: int) -> int:
        with self.db.get_cursor() as cur:
            cur.execute("DELETE FROM users WHERE id = ?;", (user_id,))
            return cur.rowcount
