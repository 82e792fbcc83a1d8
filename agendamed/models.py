# agendamed/models.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class NewUser:
    username: str
    password: str
    name: str
    email: str
    endereco: str
    numero: str
    cep: str
    plano: str
    complemento: Optional[str] = None
    telefone: Optional[str] = None


@dataclass
class NewDoctor:
    name: str
    specialty: str
    location: str
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class Address:
    logradouro: str = ""
    complemento: str = ""
