# agendamed/services/doctor_service.py
from typing import Optional, Dict, Any, List

from ..db import Database
from ..models import NewDoctor
from ..repositories.doctors import DoctorRepository


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    # email vazio viraria duplicado no UNIQUE; grava NULL
    value = (value or "").strip()
    return value or None


class DoctorService:
    def __init__(self, db: Database) -> None:
        self.docs = DoctorRepository(db)

    def list(self) -> List[Dict[str, Any]]:
        return self.docs.fetch_all()

    def search(self, specialty: str = "", location: str = "") -> List[Dict[str, Any]]:
        return self.docs.fetch_with_filters(specialty=specialty, location=location)

    def by_id(self, doctor_id: int) -> Optional[Dict[str, Any]]:
        return self.docs.by_id(doctor_id)

    def create(self, doctor: NewDoctor) -> int:
        return self.docs.register(
            doctor.name,
            doctor.specialty,
            doctor.location,
            _blank_to_none(doctor.email),
            _blank_to_none(doctor.phone),
        )

    def update(self, doctor_id: int, payload: Dict[str, Any]) -> int:
        data = dict(payload)
        data["email"] = _blank_to_none(data.get("email"))
        data["phone"] = _blank_to_none(data.get("phone"))
        return self.docs.update(doctor_id, data)

    def delete(self, doctor_id: int) -> int:
        return self.docs.delete(doctor_id)
