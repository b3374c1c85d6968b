from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, redirect, render_template, request, send_file, session, url_for

from ..common.datetime_utils import now_local, parse_iso_date
from ..container import Container
from ..core.exceptions import DomainError
from ..web.guards import admin_required, driver_required

logger = logging.getLogger(__name__)


def _selected_day(value: str) -> date:
    try:
        return parse_iso_date(value) if value else now_local().date()
    except DomainError as e:
        flash(str(e), "warning")
        return now_local().date()


def register(app: Flask, container: Container) -> None:
    @app.route("/diario", methods=["GET", "POST"], endpoint="logbook_day")
    @driver_required
    def logbook_day():
        driver_id = int(session["user_id"])
        day = _selected_day(request.values.get("date", ""))

        if request.method == "POST":
            try:
                container.logbook_service.add_entry(
                    driver_id=driver_id,
                    trip_date=day.isoformat(),
                    direction=request.form.get("direction", ""),
                    origin=request.form.get("origin", ""),
                    km_start=request.form.get("km_start", ""),
                    start_time=request.form.get("start_time", ""),
                    destination=request.form.get("destination", ""),
                    end_time=request.form.get("end_time", ""),
                )
                flash("Viagem salva com sucesso!", "success")
                return redirect(url_for("logbook_day", date=day.isoformat()))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao salvar trecho do diario driver_id=%s", driver_id)
                flash("Erro ao salvar a viagem.", "danger")

        round_trips = container.logbook_service.day_view(driver_id=driver_id, day=day)
        return render_template("logbook/day.html", day=day, round_trips=round_trips, active_page="logbook_day")

    @app.route("/diario/fechamento", methods=["GET", "POST"], endpoint="logbook_close")
    @driver_required
    def logbook_close():
        driver_id = int(session["user_id"])
        day = _selected_day(request.values.get("date", ""))

        if request.method == "POST":
            try:
                container.logbook_service.close_week(
                    driver_id=driver_id,
                    day=day,
                    signature=request.form.get("signature", ""),
                    tractor=request.form.get("tractor", ""),
                    trailer=request.form.get("trailer", ""),
                    period=request.form.get("period", ""),
                    justification=request.form.get("justification", ""),
                )
                flash("Fechamento enviado com sucesso!", "success")
                return redirect(url_for("logbook_close", date=day.isoformat()))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao enviar fechamento driver_id=%s", driver_id)
                flash("Erro ao enviar fechamento.", "danger")

        view = container.logbook_service.week_view(driver_id=driver_id, day=day)
        return render_template("logbook/close.html", day=day, view=view, active_page="logbook_close")

    @app.route("/admin/diario", methods=["GET"], endpoint="admin_logbook")
    @admin_required
    def admin_logbook():
        overview = None
        try:
            overview = container.logbook_service.week_overview(request.args.get("semana", ""))
        except DomainError as e:
            flash(str(e), "danger")
            overview = container.logbook_service.week_overview()
        return render_template("admin/logbook.html", overview=overview, active_page="admin_logbook")

    @app.route("/admin/diario/<int:driver_id>/<week>/pdf", methods=["GET"], endpoint="logbook_pdf")
    @admin_required
    def logbook_pdf(driver_id: int, week: str):
        try:
            path = container.logbook_service.delivery_pdf(driver_id=driver_id, week_code=week)
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("admin_logbook", semana=week))
        return send_file(path, mimetype="application/pdf")
