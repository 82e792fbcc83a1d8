# agendamed/repositories/doctors.py
import logging
from typing import Optional, Dict, Any, List

from ..db import Database
from ..errors import store_errors

logger = logging.getLogger(__name__)


class DoctorRepository:
    def __init__(self, db: Database):
        self.db = db

    @store_errors("Falha ao registrar médico")
    def register(
        self,
        name: str,
        specialty: str,
        location: str,
        email: Optional[str],
        phone: Optional[str],
    ) -> int:
        """Cadastra o médico (disponível por padrão) e devolve o id."""
        with self.db.get_cursor() as cur:
            cur.execute(
                """
                INSERT INTO doctors (name, specialty, location, email, phone)
                VALUES (:name, :specialty, :location, :email, :phone);
                """,
                {
                    "name": name,
                    "specialty": specialty,
                    "location": location,
                    "email": email,
                    "phone": phone,
                },
            )
            doctor_id = cur.lastrowid
        logger.info("Doctor %s registered", doctor_id)
        return doctor_id

    @store_errors("Erro ao buscar médicos")
    def fetch_all(self) -> List[Dict[str, Any]]:
        with self.db.get_cursor() as cur:
            cur.execute("SELECT * FROM doctors;")
            return cur.fetchall()

    @store_errors("Erro ao buscar médicos")
    def by_id(self, doctor_id: int) -> Optional[Dict[str, Any]]:
        with self.db.get_cursor() as cur:
            cur.execute("SELECT * FROM doctors WHERE id = ?;", (doctor_id,))
            return cur.fetchone()

    @store_errors("Erro ao buscar médicos com filtros")
    def fetch_with_filters(
        self,
        specialty: Optional[str] = None,
        location: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Só médicos disponíveis; cada filtro não vazio acrescenta um
        LIKE '%valor%' sem diferenciar maiúsculas.
        """
        wh: list[str] = ["available = 1"]
        params: list[Any] = []
        if specialty:
            wh.append("LOWER(specialty) LIKE LOWER(?)")
            params.append(f"%{specialty}%")
        if location:
            wh.append("LOWER(location) LIKE LOWER(?)")
            params.append(f"%{location}%")

        sql = f"SELECT * FROM doctors WHERE {' AND '.join(wh)};"
        with self.db.get_cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchall()

    @store_errors("Erro ao atualizar médico")
    def update(self, doctor_id: int, updates: Dict[str, Any]) -> int:
        with self.db.get_cursor() as cur:
            cur.execute(
                """
                UPDATE doctors
                   SET name = ?, specialty = ?, location = ?,
                       email = ?, phone = ?, available = ?
                 WHERE id = ?;
                """,
                (
                    updates.get("name"),
                    updates.get("specialty"),
                    updates.get("location"),
                    updates.get("email"),
                    updates.get("phone"),
                    1 if updates.get("available") else 0,
                    doctor_id,
                ),
            )
            return cur.rowcount

    @store_errors("Erro ao deletar médico")
    def delete(self, doctor_id: int) -> int:
        with self.db.get_cursor() as cur:
            cur.execute("DELETE FROM doctors WHERE id = ?;", (doctor_id,))
            return cur.rowcount
