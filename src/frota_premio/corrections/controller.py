from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, send_file, session, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..web.forms import optional_date, page_number, uploaded
from ..web.guards import admin_required, driver_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/motorista/correcoes", methods=["GET", "POST"], endpoint="my_corrections")
    @driver_required
    def my_corrections():
        driver_id = int(session["user_id"])
        if request.method == "POST":
            try:
                filename, data = uploaded("receipt")
                container.correction_service.submit(
                    driver_id=driver_id,
                    origin=request.form.get("origin", ""),
                    destination=request.form.get("destination", ""),
                    trip_date=request.form.get("trip_date", ""),
                    container=request.form.get("container", ""),
                    message=request.form.get("message", ""),
                    receipt_filename=filename,
                    receipt_data=data,
                )
                flash("Correção enviada para análise.", "success")
                return redirect(url_for("my_corrections"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao enviar correcao driver_id=%s", driver_id)
                flash("Erro ao enviar a correção.", "danger")

        corrections = container.correction_service.list_mine(driver_id)
        return render_template("driver/corrections.html", corrections=corrections, active_page="my_corrections")

    @app.route("/admin/correcoes", methods=["GET"], endpoint="admin_corrections")
    @admin_required
    def admin_corrections():
        page = None
        try:
            page = container.correction_service.list_pending(
                page=page_number(request.args.get("page")),
                created_from=optional_date(request.args.get("start")),
                created_to=optional_date(request.args.get("end")),
            )
        except DomainError as e:
            flash(str(e), "danger")

        return render_template(
            "admin/corrections.html",
            page=page,
            start=request.args.get("start", ""),
            end=request.args.get("end", ""),
            active_page="admin_corrections",
        )

    @app.route("/admin/correcoes/<int:correction_id>/aprovar", methods=["POST"], endpoint="approve_correction")
    @admin_required
    def approve_correction(correction_id: int):
        try:
            container.correction_service.approve(correction_id, value=request.form.get("value", ""))
            flash("Viagem aprovada e incluída.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao aprovar correcao %s", correction_id)
            flash("Erro ao aprovar a correção.", "danger")
        return redirect(url_for("admin_corrections"))

    @app.route("/admin/correcoes/<int:correction_id>/reprovar", methods=["POST"], endpoint="reject_correction")
    @admin_required
    def reject_correction(correction_id: int):
        try:
            container.correction_service.reject(correction_id)
            flash("Correção reprovada.", "info")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao reprovar correcao %s", correction_id)
            flash("Erro ao reprovar a correção.", "danger")
        return redirect(url_for("admin_corrections"))

    @app.route("/admin/correcoes/<int:correction_id>/comprovante", methods=["GET"], endpoint="correction_receipt")
    @admin_required
    def correction_receipt(correction_id: int):
        try:
            path = container.correction_service.receipt_file(correction_id)
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("admin_corrections"))
        return send_file(path)
