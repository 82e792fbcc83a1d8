# agendamed/blueprints/auth.py
import logging
from dataclasses import asdict

from flask import (
    Blueprint, render_template, request, session, redirect, url_for,
    flash, jsonify, current_app,
)

from ..db import get_db
from ..errors import AgendamedError, PostalLookupError, InvalidCepError, CepNotFoundError
from ..models import NewUser
from ..services.user_service import UserService

bp = Blueprint("auth", __name__)
logger = logging.getLogger(__name__)

HEALTH_PLANS = [
    "Sulamerica", "Unimed", "Bradesco", "Amil",
    "Biosaúde", "Biovida", "Outros", "Não tenho plano",
]

REGISTER_FIELDS = [
    "username", "name", "email",
    "cep", "endereco", "numero", "complemento", "telefone", "plano",
]


def _svc() -> UserService:
    return UserService(get_db())


@bp.route("/")
def index():
    return render_template("home.html")


@bp.route("/login", methods=["GET", "POST"])
def login():
    error = None
    if request.method == "POST":
        try:
            user = _svc().login(
                request.form.get("username", ""),
                request.form.get("password", ""),
            )
        except AgendamedError as e:
            error = e.message
        else:
            if not user:
                error = "Nome de usuário ou senha inválidos"
            else:
                session.clear()
                session["user_id"] = user["id"]
                session["username"] = user["username"]
                session["name"] = user["name"]
                return redirect(url_for("auth.index"))
    return render_template("auth/login.html", error=error)


@bp.route("/logout")
def logout():
    session.clear()
    return redirect(url_for("auth.login"))


@bp.route("/register", methods=["GET", "POST"])
def register():
    form = {k: "" for k in REGISTER_FIELDS}
    error = None

    if request.method == "POST":
        form = {k: (request.form.get(k) or "").strip() for k in REGISTER_FIELDS}
        password = request.form.get("password", "")
        repeat = request.form.get("repeat_password", "")

        if password != repeat:
            error = "As senhas não coincidem"
        elif not form["plano"]:
            error = "Selecione um plano de saúde"
        else:
            user = NewUser(password=password, **form)
            try:
                _svc().register(user)
            except AgendamedError as e:
                logger.warning("Registration failed for %s: %s", user.username, e)
                error = "Falha no registro"
            else:
                flash("Usuário registrado com sucesso", "ok")
                return redirect(url_for("auth.login"))

    return render_template(
        "auth/register.html",
        form=form,
        plans=HEALTH_PLANS,
        error=error,
    )


@bp.route("/cep/<cep>")
def cep_lookup(cep: str):
    """Usado pelo formulário de cadastro para preencher endereço e complemento."""
    try:
        address = current_app.extensions["agendamed.cep"].lookup(cep)
    except InvalidCepError as e:
        return jsonify({"ok": False, "error": e.message}), 400
    except CepNotFoundError as e:
        return jsonify({"ok": False, "error": e.message}), 404
    except PostalLookupError as e:
        return jsonify({"ok": False, "error": e.message}), 502
    return jsonify({"ok": True, **asdict(address)})
