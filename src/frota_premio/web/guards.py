"""Session guards shared by every controller."""
from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, request, session, url_for

from ..core.enums import Role

# Endpoints reachable while a password change is still pending
_PASSWORD_CHANGE_ALLOWED = {"change_password", "logout"}


def current_user() -> dict:
    return {
        "driver_id": session.get("user_id"),
        "name": session.get("name"),
        "email": session.get("email"),
        "role": session.get("role"),
    }


def _forbidden():
    return render_template("403.html", current_user=current_user()), 403


def _check_session():
    if "user_id" not in session:
        flash("Faça login para continuar.", "warning")
        return redirect(url_for("login"))
    if session.get("must_change_password") and request.endpoint not in _PASSWORD_CHANGE_ALLOWED:
        flash("Defina uma nova senha para continuar.", "warning")
        return redirect(url_for("change_password"))
    return None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        denied = _check_session()
        if denied is not None:
            return denied
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        denied = _check_session()
        if denied is not None:
            return denied
        if session.get("role") != Role.ADMIN.value:
            return _forbidden()
        return view(*args, **kwargs)

    return wrapper


def driver_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        denied = _check_session()
        if denied is not None:
            return denied
        if session.get("role") != Role.DRIVER.value:
            return _forbidden()
        return view(*args, **kwargs)

    return wrapper
