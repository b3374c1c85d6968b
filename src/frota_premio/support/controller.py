from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import ContactCategory
from ..core.exceptions import DomainError
from ..web.guards import admin_required, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/contato", methods=["GET", "POST"], endpoint="public_contact")
    def public_contact():
        if request.method == "POST":
            try:
                container.support_service.submit_login_correction(
                    submitter=request.form.get("submitter", ""),
                    message=request.form.get("message", ""),
                )
                flash("Mensagem enviada. O suporte entrará em contato.", "success")
                return redirect(url_for("login"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao enviar contato publico")
                flash("Erro ao enviar a mensagem.", "danger")

        return render_template("support/public.html")

    @app.route("/motorista/contato", methods=["GET", "POST"], endpoint="driver_contact")
    @login_required
    def driver_contact():
        if request.method == "POST":
            try:
                container.support_service.submit_other(
                    email=session.get("email", ""),
                    message=request.form.get("message", ""),
                )
                flash("Mensagem enviada ao suporte.", "success")
                return redirect(url_for("driver_contact"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao enviar contato email=%s", session.get("email"))
                flash("Erro ao enviar a mensagem.", "danger")

        return render_template("support/driver.html", active_page="driver_contact")

    @app.route("/admin/contato", methods=["GET"], endpoint="admin_contacts")
    @admin_required
    def admin_contacts():
        category = request.args.get("tipo", ContactCategory.LOGIN_CORRECTION.value)
        contacts = []
        try:
            contacts = container.support_service.list_by_category(category)
        except DomainError as e:
            flash(str(e), "danger")
        return render_template(
            "admin/contacts.html",
            contacts=contacts,
            category=category,
            categories=list(ContactCategory),
            active_page="admin_contacts",
        )
