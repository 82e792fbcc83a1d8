# agendamed/services/cep_service.py
import logging
import re

import requests

from ..errors import CepNotFoundError, InvalidCepError, PostalLookupError
from ..models import Address

logger = logging.getLogger(__name__)


def clean_cep(cep: str) -> str:
    """'17.500-000' -> '17500000'"""
    return re.sub(r"\D", "", cep or "")


class CepService:
    """Consulta de endereço por CEP no ViaCEP."""

    def __init__(self, base_url: str = "https://viacep.com.br/ws", timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def lookup(self, cep: str) -> Address:
        cleaned = clean_cep(cep)
        if len(cleaned) != 8:
            raise InvalidCepError("CEP inválido")

        url = f"{self.base_url}/{cleaned}/json/"
        try:
            r = requests.get(url, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.exception("CEP lookup failed for %s", cleaned)
            raise PostalLookupError("Não foi possível buscar o CEP") from e

        # ViaCEP devolve 200 com {"erro": true} (às vezes "true") para CEP inexistente
        if data.get("erro"):
            raise CepNotFoundError("CEP não encontrado")

        return Address(
            logradouro=data.get("logradouro") or "",
            complemento=data.get("complemento") or "",
        )
