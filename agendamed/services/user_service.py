# agendamed/services/user_service.py
from dataclasses import asdict

from ..db import Database
from ..errors import store_errors
from ..models import NewUser
from ..repositories.users import UserRepository


class UserService:
    def __init__(self, db: Database):
        self.db = db
        self.users = UserRepository(db)

    # ---- Autenticação ----
    def login(self, username: str, password: str):
        return self.users.login(username, password)

    @store_errors("Falha ao registrar usuário")
    def register(self, user: NewUser) -> int:
        """Cadastro numa transação; qualquer falha (inclusive no commit) desfaz tudo."""
        with self.db.transaction():
            return self.users.register(**asdict(user))

    # ---- Administração ----
    def list_users(self):
        return self.users.fetch_all()

    def by_id(self, user_id: int):
        return self.users.by_id(user_id)

    def update_user(self, user_id: int, fields: dict) -> int:
        return self.users.update(user_id, fields)

    def delete_user(self, user_id: int) -> int:
        return self.users.delete(user_id)
