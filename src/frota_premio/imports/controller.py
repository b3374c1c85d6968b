from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..web.forms import uploaded
from ..web.guards import admin_required

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/importar", methods=["GET", "POST"], endpoint="import_trips")
    @admin_required
    def import_trips():
        if request.method == "POST":
            try:
                filename, data = uploaded("file")
                result = container.import_service.import_trips(filename=filename, data=data)
                flash(result.message, "success")
                return redirect(url_for("import_trips"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("erro ao importar planilha de viagens")
                flash("Erro ao importar. Verifique os dados e o formato das datas.", "danger")

        return render_template("admin/import.html", active_page="import_trips")

    @app.route("/admin/importar/modelo", methods=["GET"], endpoint="import_template")
    @admin_required
    def import_template():
        output = container.import_service.trip_template()
        return send_file(
            output,
            download_name="modelo_importacao_viagens.xlsx",
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
