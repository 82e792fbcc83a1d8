# agendamed/__init__.py
import logging
from datetime import datetime

import click
from flask import Flask

from .config import Config
from .db import init_db, create_schema, get_db
from .filters import register_filters
from .services.cep_service import CepService
from .blueprints.auth import bp as auth_bp
from .blueprints.explore import bp as explore_bp
from .blueprints.profile import bp as profile_bp
from .blueprints.consultations import bp as consultations_bp


def create_app(overrides: dict | None = None):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(Config())
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # handle único do banco, criado aqui e reaproveitado em toda requisição
    app.extensions["agendamed.db"] = init_db(
        app.config["DATABASE_PATH"], seed=app.config["SEED_DOCTORS"]
    )
    app.extensions["agendamed.cep"] = CepService(
        app.config["VIACEP_URL"], app.config["VIACEP_TIMEOUT"]
    )

    @app.context_processor
    def inject_globals():
        return {"current_year": datetime.now().year}

    register_filters(app)

    @app.cli.command("init-db")
    @click.option("--no-seed", is_flag=True, help="Não cadastra os médicos padrão.")
    def init_db_command(no_seed):
        """Cria as tabelas (e os médicos padrão) no arquivo configurado."""
        create_schema(get_db(), seed=not no_seed)
        click.echo(f"Banco pronto em {app.config['DATABASE_PATH']}")

    # Blueprints (as cinco telas)
    app.register_blueprint(auth_bp)
    app.register_blueprint(explore_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(consultations_bp)
    return app
