from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..web.guards import admin_required, driver_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/motorista/dia-parado", methods=["GET", "POST"], endpoint="driver_stoppage")
    @driver_required
    def driver_stoppage():
        if request.method == "POST":
            try:
                container.stoppage_service.request(
                    driver_name=session.get("name", ""),
                    stop_date=request.form.get("stop_date", ""),
                    start_time=request.form.get("start_time", ""),
                    end_time=request.form.get("end_time", ""),
                    submitted_by=session.get("email"),
                )
                flash("Dia parado enviado para aprovação.", "success")
                return redirect(url_for("driver_stoppage"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao solicitar dia parado motorista=%s", session.get("name"))
                flash("Erro ao enviar o dia parado.", "danger")

        return render_template("driver/stoppage.html", active_page="driver_stoppage")

    @app.route("/admin/dia-parado", methods=["GET", "POST"], endpoint="admin_stoppages")
    @admin_required
    def admin_stoppages():
        if request.method == "POST":
            try:
                stoppage = container.stoppage_service.include_direct(
                    driver_name=request.form.get("driver_name", ""),
                    stop_date=request.form.get("stop_date", ""),
                    start_time=request.form.get("start_time", ""),
                    end_time=request.form.get("end_time", ""),
                )
                flash(
                    f"Dia parado incluído: {stoppage.inclusion.value} (R$ {stoppage.value:.2f}).",
                    "success",
                )
                return redirect(url_for("admin_stoppages"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao incluir dia parado")
                flash("Erro ao incluir o dia parado.", "danger")

        driver_filter = request.args.get("motorista", "")
        return render_template(
            "admin/stoppages.html",
            drivers=container.driver_service.list_driver_names(),
            pending=container.stoppage_service.list_pending(),
            records=container.stoppage_service.list_records(driver_name=driver_filter),
            driver_filter=driver_filter,
            active_page="admin_stoppages",
        )

    @app.route("/admin/dia-parado/<int:pending_id>/aprovar", methods=["POST"], endpoint="approve_stoppage")
    @admin_required
    def approve_stoppage(pending_id: int):
        try:
            stoppage = container.stoppage_service.approve_pending(pending_id)
            flash(f"Aprovado: {stoppage.inclusion.value} (R$ {stoppage.value:.2f}).", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao aprovar dia parado %s", pending_id)
            flash("Erro ao aprovar o dia parado.", "danger")
        return redirect(url_for("admin_stoppages"))

    @app.route("/admin/dia-parado/<int:pending_id>/reprovar", methods=["POST"], endpoint="reject_stoppage")
    @admin_required
    def reject_stoppage(pending_id: int):
        try:
            container.stoppage_service.reject_pending(pending_id)
            flash("Solicitação recusada.", "info")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("erro ao recusar dia parado %s", pending_id)
            flash("Erro ao recusar o dia parado.", "danger")
        return redirect(url_for("admin_stoppages"))
