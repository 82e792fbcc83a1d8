# agendamed/repositories/appointments.py
import logging
from datetime import datetime
from typing import Optional, Dict, Any, List

from ..db import Database
from ..errors import store_errors

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "agendada"


def _parse_date(value: Any) -> Optional[datetime]:
    """Aceita 'YYYY-MM-DD' ou ISO com hora; None se não der para ler."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(str(value))
    except ValueError:
        return None
    # datas com fuso viram horário local ingênuo para comparar com now()
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def is_past(value: Any, now: Optional[datetime] = None) -> bool:
    dt = _parse_date(value)
    if dt is None:
        return False
    return dt < (now or datetime.now())


class AppointmentRepository:
    def __init__(self, db: Database):
        self.db = db

    @store_errors("Falha ao agendar consulta")
    def register(self, user_id: int, doctor_id: int, date: str) -> int:
        with self.db.get_cursor() as cur:
            cur.execute(
                """
                INSERT INTO appointments (user_id, doctor_id, date, status)
                VALUES (:user_id, :doctor_id, :date, :status);
                """,
                {
                    "user_id": user_id,
                    "doctor_id": doctor_id,
                    "date": date,
                    "status": DEFAULT_STATUS,
                },
            )
            appointment_id = cur.lastrowid
        logger.info("Appointment %s booked (user %s, doctor %s)", appointment_id, user_id, doctor_id)
        return appointment_id

    @store_errors("Erro ao buscar consultas")
    def fetch_by_user(self, user_id: int, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """
        Consultas do usuário com nome/especialidade do médico, da mais
        recente para a mais antiga. `isPast` é calculado na leitura.
        """
        sql = """
            SELECT appointments.*, doctors.name AS doctorName, doctors.specialty
              FROM appointments
              JOIN doctors ON appointments.doctor_id = doctors.id
             WHERE appointments.user_id = ?
             ORDER BY appointments.date DESC;
        """
        with self.db.get_cursor() as cur:
            cur.execute(sql, (user_id,))
            rows = cur.fetchall()

        now = now or datetime.now()
        return [{**row, "isPast": is_past(row["date"], now)} for row in rows]

    @store_errors("Erro ao buscar consultas")
    def by_id(self, appointment_id: int) -> Optional[Dict[str, Any]]:
        with self.db.get_cursor() as cur:
            cur.execute("SELECT * FROM appointments WHERE id = ?;", (appointment_id,))
            return cur.fetchone()

    @store_errors("Erro ao cancelar consulta")
    def cancel(self, appointment_id: int) -> int:
        with self.db.get_cursor() as cur:
            cur.execute("DELETE FROM appointments WHERE id = ?;", (appointment_id,))
            return cur.rowcount

    @store_errors("Erro ao reagendar consulta")
    def reschedule(self, appointment_id: int, new_date: str) -> int:
        with self.db.get_cursor() as cur:
            cur.execute(
                "UPDATE appointments SET date = ? WHERE id = ?;",
                (new_date, appointment_id),
            )
            return cur.rowcount
