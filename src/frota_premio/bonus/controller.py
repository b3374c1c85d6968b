from __future__ import annotations

import logging

from flask import Flask, flash, render_template, request, session

from ..common.datetime_utils import current_competencia
from ..container import Container
from ..core.exceptions import DomainError
from ..web.guards import admin_required, driver_required

logger = logging.getLogger(__name__)

ALL_DRIVERS = "__todos__"


def register(app: Flask, container: Container) -> None:
    @app.route("/motorista/premiacao", methods=["GET"], endpoint="driver_bonus")
    @driver_required
    def driver_bonus():
        competencia = request.args.get("competencia") or current_competencia()
        summary = None
        try:
            summary = container.bonus_service.summary_for_driver_id(
                driver_id=int(session["user_id"]), competencia=competencia
            )
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao calcular premiacao driver_id=%s", session.get("user_id"))
            flash("Erro ao calcular a premiação.", "danger")

        return render_template(
            "driver/bonus.html",
            summary=summary,
            competencia=competencia,
            active_page="driver_bonus",
        )

    @app.route("/admin/resumo", methods=["GET"], endpoint="admin_summary")
    @admin_required
    def admin_summary():
        competencia = request.args.get("competencia") or current_competencia()
        driver = request.args.get("motorista", "")
        summary = None
        rows = None
        try:
            if driver == ALL_DRIVERS:
                rows = container.bonus_service.summary_all(competencia=competencia)
            elif driver:
                summary = container.bonus_service.summary(driver_name=driver, competencia=competencia)
                if not summary.trips:
                    flash("Nenhuma viagem encontrada para o filtro selecionado.", "warning")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro no resumo de premiacao motorista=%s competencia=%s", driver, competencia)
            flash("Erro ao calcular o resumo.", "danger")

        return render_template(
            "admin/summary.html",
            drivers=container.driver_service.list_driver_names(),
            all_drivers=ALL_DRIVERS,
            driver=driver,
            competencia=competencia,
            summary=summary,
            rows=rows,
            active_page="admin_summary",
        )
