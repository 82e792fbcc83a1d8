# agendamed/blueprints/explore.py
from flask import Blueprint, render_template, request, flash

from ..db import get_db
from ..errors import AgendamedError
from ..services.doctor_service import DoctorService

bp = Blueprint("explore", __name__)

# sugestões do combo de localização
LOCATIONS = ["São Paulo", "Rio de Janeiro", "Belo Horizonte", "Curitiba"]


@bp.route("/explore")
def explore():
    specialty = (request.args.get("specialty") or "").strip()
    location = (request.args.get("location") or "").strip()
    searched = "specialty" in request.args or "location" in request.args

    svc = DoctorService(get_db())
    doctors = []
    try:
        # sem busca: todos os médicos; com busca: só os disponíveis
        doctors = svc.search(specialty, location) if searched else svc.list()
    except AgendamedError as e:
        flash(e.message, "error")

    return render_template(
        "explore.html",
        doctors=doctors,
        specialty=specialty,
        location=location,
        locations=LOCATIONS,
    )
