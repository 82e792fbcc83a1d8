# agendamed/errors.py
import functools
import logging
import sqlite3

logger = logging.getLogger(__name__)


class AgendamedError(Exception):
    """Erro com mensagem pronta para exibir ao usuário."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataAccessError(AgendamedError):
    pass


class PostalLookupError(AgendamedError):
    pass


class InvalidCepError(PostalLookupError):
    pass


class CepNotFoundError(PostalLookupError):
    pass


def store_errors(message: str):
    """
    Decorator dos métodos de repositório: falha do SQLite vira
    DataAccessError com a mensagem para o usuário (encadeada ao erro
    original). Não há retry.
    """

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except sqlite3.Error as e:
                logger.exception("%s failed: %s", fn.__qualname__, e)
                raise DataAccessError(message) from e

        return wrapper

    return decorator
