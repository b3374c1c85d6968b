from __future__ import annotations

import logging

from flask import Flask, flash, render_template, request, session

from ..container import Container
from ..core.exceptions import DomainError
from ..web.forms import optional_date
from ..web.guards import driver_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/motorista/viagens", methods=["GET"], endpoint="my_trips")
    @driver_required
    def my_trips():
        competencia = request.args.get("competencia", "").strip()
        listing = None
        try:
            listing = container.trip_service.list_my_trips(
                email=session["email"],
                competencia=competencia,
                start=optional_date(request.args.get("start")),
                end=optional_date(request.args.get("end")),
            )
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao listar viagens email=%s", session.get("email"))
            flash("Erro ao carregar viagens.", "danger")

        return render_template(
            "driver/trips.html",
            listing=listing,
            competencia=competencia,
            start=request.args.get("start", ""),
            end=request.args.get("end", ""),
            active_page="my_trips",
        )
