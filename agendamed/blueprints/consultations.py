# agendamed/blueprints/consultations.py
from flask import Blueprint, render_template, request, session, redirect, url_for, abort, flash

from ..db import get_db
from ..errors import AgendamedError
from ..services.appointment_service import AppointmentService
from ..services.doctor_service import DoctorService

bp = Blueprint("consultations", __name__)


@bp.before_request
def guard():
    if not session.get("user_id"):
        return redirect(url_for("auth.login"))


def _own_or_404(svc: AppointmentService, appointment_id: int):
    appt = svc.get_for_user(appointment_id, session["user_id"])
    if not appt:
        abort(404)
    return appt


@bp.route("/consultations")
def list_consultations():
    svc = AppointmentService(get_db())
    appointments, doctors = [], []
    try:
        appointments = svc.list_for_user(session["user_id"])
        doctors = DoctorService(get_db()).search()
    except AgendamedError as e:
        flash(e.message, "error")
    return render_template(
        "consultations.html",
        appointments=appointments,
        doctors=doctors,
        selected_doctor=request.args.get("doctor_id", type=int),
    )


@bp.route("/consultations/new", methods=["POST"])
def book():
    doctor_id = request.form.get("doctor_id", type=int)
    date = (request.form.get("date") or "").strip()
    if not doctor_id or not date:
        flash("Escolha o médico e a data da consulta.", "error")
        return redirect(url_for("consultations.list_consultations"))
    try:
        AppointmentService(get_db()).book(session["user_id"], doctor_id, date)
        flash("Consulta agendada.", "ok")
    except AgendamedError as e:
        flash(e.message, "error")
    return redirect(url_for("consultations.list_consultations"))


@bp.route("/consultations/<int:appointment_id>/cancel", methods=["POST"])
def cancel(appointment_id: int):
    svc = AppointmentService(get_db())
    _own_or_404(svc, appointment_id)
    try:
        svc.cancel(appointment_id)
        flash("Consulta cancelada.", "ok")
    except AgendamedError as e:
        flash(e.message, "error")
    return redirect(url_for("consultations.list_consultations"))


@bp.route("/consultations/<int:appointment_id>/reschedule", methods=["POST"])
def reschedule(appointment_id: int):
    svc = AppointmentService(get_db())
    _own_or_404(svc, appointment_id)
    new_date = (request.form.get("date") or "").strip()
    if not new_date:
        flash("Informe a nova data.", "error")
        return redirect(url_for("consultations.list_consultations"))
    try:
        svc.reschedule(appointment_id, new_date)
        flash("Consulta reagendada.", "ok")
    except AgendamedError as e:
        flash(e.message, "error")
    return redirect(url_for("consultations.list_consultations"))
