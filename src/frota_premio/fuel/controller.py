from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..web.forms import uploaded
from ..web.guards import admin_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/combustivel", methods=["GET", "POST"], endpoint="admin_fuel")
    @admin_required
    def admin_fuel():
        if request.method == "POST":
            try:
                filename, data = uploaded("file")
                result = container.import_service.import_fuel(
                    competencia=request.form.get("competencia", ""),
                    filename=filename,
                    data=data,
                )
                flash(result.message, "success")
                return redirect(url_for("admin_fuel"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao importar planilha de diesel")
                flash("Erro ao processar a planilha.", "danger")

        driver_filter = request.args.get("motorista", "")
        competencia = request.args.get("competencia", "")
        records = []
        try:
            records = container.fuel_service.list_records(driver_filter=driver_filter, competencia=competencia)
        except DomainError as e:
            flash(str(e), "danger")

        return render_template(
            "admin/fuel.html",
            records=records,
            driver_filter=driver_filter,
            competencia=competencia,
            active_page="admin_fuel",
        )
