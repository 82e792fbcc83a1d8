# agendamed/services/appointment_service.py
from ..db import Database
from ..repositories.appointments import AppointmentRepository


class AppointmentService:
    def __init__(self, db: Database):
        self.repo = AppointmentRepository(db)

    def book(self, user_id: int, doctor_id: int, date: str) -> int:
        return self.repo.register(user_id, doctor_id, date)

    def list_for_user(self, user_id: int):
        return self.repo.fetch_by_user(user_id)

    def get_for_user(self, appointment_id: int, user_id: int):
        """None se a consulta não existir ou for de outro usuário."""
        appt = self.repo.by_id(appointment_id)
        if appt is None or appt["user_id"] != user_id:
            return None
        return appt

    def cancel(self, appointment_id: int) -> int:
        return self.repo.cancel(appointment_id)

    def reschedule(self, appointment_id: int, new_date: str) -> int:
        return self.repo.reschedule(appointment_id, new_date)
