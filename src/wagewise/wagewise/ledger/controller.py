from __future__ import annotations

import csv
import io

from flask import Flask, redirect, render_template, request, send_file, session, url_for

from ..common.pending import arm, disarm, take_if_armed
from ..common.status import set_status
from ..core.enums import MessageLevel, PendingKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .report import EXPORT_FIELDS, report_to_excel


def register(app: Flask, container: Container) -> None:
    def _notify(text: str, level: MessageLevel = MessageLevel.SUCCESS) -> None:
        set_status(session, text, level, seconds=app.config["STATUS_MESSAGE_SECONDS"])

    def _report_range() -> tuple[str | None, str | None]:
        return request.args.get("start") or None, request.args.get("end") or None

    def _write_report_csv(*, data, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/employee", methods=["GET"], endpoint="ledger")
    def ledger():
        svc = container.ledger_service
        rows = svc.list_rows()
        return render_template(
            "ledger.html",
            rows=rows,
            totals=svc.totals([r.entry for r in rows]),
            editing_id=request.args.get("edit"),
            active_page="ledger",
        )

    @app.route("/employee/<entry_id>/amount", methods=["POST"], endpoint="ledger_adjust")
    def ledger_adjust(entry_id: str):
        try:
            container.ledger_service.adjust_amount(entry_id, request.form.get("field", ""), request.form.get("value"))
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        return redirect(url_for("ledger"))

    @app.route("/employee/<entry_id>/edit", methods=["POST"], endpoint="ledger_edit")
    def ledger_edit(entry_id: str):
        try:
            container.ledger_service.edit_entry(
                entry_id,
                employee_name=request.form.get("name", ""),
                wage=request.form.get("wage"),
            )
            _notify("Entry updated.")
        except ValidationError as e:
            _notify(str(e), MessageLevel.WARNING)
            return redirect(url_for("ledger", edit=entry_id))
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        except Exception:
            app.logger.exception("Updating ledger entry failed")
            _notify("System error while updating entry.", MessageLevel.DANGER)
        return redirect(url_for("ledger"))

    @app.route("/employee/<entry_id>/delete", methods=["POST"], endpoint="ledger_delete")
    def ledger_delete(entry_id: str):
        arm(session, PendingKind.DELETE_LEDGER_ENTRY, entry_id)
        return redirect(url_for("ledger"))

    @app.route("/employee/<entry_id>/delete/confirm", methods=["POST"], endpoint="ledger_confirm_delete")
    def ledger_confirm_delete(entry_id: str):
        if not take_if_armed(session, PendingKind.DELETE_LEDGER_ENTRY, entry_id):
            return redirect(url_for("ledger"))
        try:
            container.ledger_service.delete_entry(entry_id)
            _notify("Entry deleted.")
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        return redirect(url_for("ledger"))

    @app.route("/employee/clear", methods=["POST"], endpoint="ledger_clear")
    def ledger_clear():
        arm(session, PendingKind.CLEAR_LEDGER)
        return redirect(url_for("ledger"))

    @app.route("/employee/clear/confirm", methods=["POST"], endpoint="ledger_confirm_clear")
    def ledger_confirm_clear():
        if take_if_armed(session, PendingKind.CLEAR_LEDGER):
            container.ledger_service.clear_all()
            _notify("All entries cleared.")
        return redirect(url_for("ledger"))

    @app.route("/employee/cancel", methods=["POST"], endpoint="ledger_cancel")
    def ledger_cancel():
        disarm(session)
        return redirect(url_for("ledger"))

    @app.route("/employee/report", methods=["GET"], endpoint="ledger_report")
    def ledger_report():
        start, end = _report_range()
        data = container.ledger_report_service.build_report(start=start, end=end)
        return render_template(
            "ledger_report.html",
            start=start or "",
            end=end or "",
            rows=data.rows,
            summary=data.summary,
            active_page="ledger",
        )

    @app.route("/employee/report.csv", methods=["GET"], endpoint="ledger_report_csv")
    def ledger_report_csv():
        start, end = _report_range()
        data = container.ledger_report_service.build_report(start=start, end=end)
        return _write_report_csv(data=data, filename="employee_ledger.csv")

    @app.route("/employee/report.xlsx", methods=["GET"], endpoint="ledger_report_xlsx")
    def ledger_report_xlsx():
        start, end = _report_range()
        data = container.ledger_report_service.build_report(start=start, end=end)
        return send_file(
            report_to_excel(data),
            download_name="employee_ledger.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
