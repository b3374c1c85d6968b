from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DomainError
from ..web.guards import admin_required, driver_required, login_required

logger = logging.getLogger(__name__)

MODULE_BONUS = "premiacao"
MODULE_LOGBOOK = "diario"


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("choose_module"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(username, password)

                session.clear()
                session.permanent = bool(remember)
                session["user_id"] = s_user.driver_id
                session["name"] = s_user.name
                session["email"] = s_user.email
                session["role"] = s_user.role.value
                session["must_change_password"] = s_user.must_change_password

                if s_user.must_change_password:
                    return redirect(url_for("change_password"))
                return redirect(url_for("choose_module"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro no login usuario=%s", username)
                flash("Erro ao fazer login. Tente novamente.", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Sessão encerrada.", "info")
        return redirect(url_for("login"))

    @app.route("/alterar-senha", methods=["GET", "POST"], endpoint="change_password")
    @login_required
    def change_password():
        if request.method == "POST":
            try:
                container.auth_service.change_password(
                    int(session["user_id"]),
                    new_password=request.form.get("new_password", ""),
                    confirmation=request.form.get("confirmation", ""),
                )
                session["must_change_password"] = False
                flash("Senha alterada com sucesso!", "success")
                return redirect(url_for("choose_module"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao alterar senha driver_id=%s", session.get("user_id"))
                flash("Erro ao alterar a senha.", "danger")

        return render_template("change_password.html", forced=bool(session.get("must_change_password")))

    @app.route("/escolher-modulo", methods=["GET", "POST"], endpoint="choose_module")
    @login_required
    def choose_module():
        if request.method == "POST":
            module = request.form.get("module", "")
            is_admin = session.get("role") == Role.ADMIN.value
            if module == MODULE_BONUS:
                return redirect(url_for("admin_home" if is_admin else "driver_home"))
            if module == MODULE_LOGBOOK:
                return redirect(url_for("admin_logbook" if is_admin else "logbook_day"))
            flash("Escolha um módulo.", "warning")

        return render_template("choose_module.html")

    @app.route("/admin", endpoint="admin_home")
    @admin_required
    def admin_home():
        return render_template("admin/home.html", active_page="admin_home")

    @app.route("/motorista", endpoint="driver_home")
    @driver_required
    def driver_home():
        return render_template("driver/home.html", active_page="driver_home")
