# agendamed/blueprints/profile.py
from flask import Blueprint, render_template, request, redirect, url_for, abort, flash

from ..db import get_db
from ..errors import AgendamedError
from ..models import NewDoctor
from ..services.doctor_service import DoctorService

bp = Blueprint("profile", __name__)

DOCTOR_FIELDS = ["name", "specialty", "location", "email", "phone"]
REQUIRED = ("name", "specialty", "location")


def _svc() -> DoctorService:
    return DoctorService(get_db())


def _form_payload() -> dict:
    return {k: (request.form.get(k) or "").strip() for k in DOCTOR_FIELDS}


def _doctors() -> list:
    try:
        return _svc().list()
    except AgendamedError as e:
        flash(e.message, "error")
        return []


@bp.route("/profile")
def profile():
    return render_template("profile.html", doctors=_doctors(), form={})


@bp.route("/profile/doctors", methods=["POST"])
def new_doctor():
    payload = _form_payload()
    if not all(payload[k] for k in REQUIRED):
        flash("Por favor, preencha todos os campos obrigatórios.", "error")
        return render_template("profile.html", doctors=_doctors(), form=payload), 400
    try:
        _svc().create(NewDoctor(**payload))
        flash("Médico registrado com sucesso.", "ok")
    except AgendamedError as e:
        flash(e.message, "error")
    return redirect(url_for("profile.profile"))


@bp.route("/profile/doctors/<int:doctor_id>/edit", methods=["GET", "POST"])
def edit_doctor(doctor_id: int):
    svc = _svc()
    try:
        doctor = svc.by_id(doctor_id)
    except AgendamedError as e:
        flash(e.message, "error")
        return redirect(url_for("profile.profile"))
    if not doctor:
        abort(404)

    error = None
    if request.method == "POST":
        payload = _form_payload()
        payload["available"] = request.form.get("available") == "on"
        if not all(payload[k] for k in REQUIRED):
            error = "Por favor, preencha todos os campos obrigatórios."
        else:
            try:
                svc.update(doctor_id, payload)
                flash("Médico atualizado.", "ok")
                return redirect(url_for("profile.profile"))
            except AgendamedError as e:
                error = e.message
        doctor = {**doctor, **payload}

    return render_template("doctor_form.html", doctor=doctor, error=error)


@bp.route("/profile/doctors/<int:doctor_id>/delete", methods=["POST"])
def delete_doctor(doctor_id: int):
    try:
        ok = _svc().delete(doctor_id)
        flash("Médico deletado com sucesso." if ok else "Médico não encontrado.", "ok" if ok else "error")
    except AgendamedError as e:
        flash(e.message, "error")
    return redirect(url_for("profile.profile"))
