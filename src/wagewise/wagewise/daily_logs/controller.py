from __future__ import annotations

from flask import Flask, redirect, render_template, request, session, url_for

from ..common.datetime_utils import to_storage_date, today_local
from ..common.status import set_status
from ..core.enums import MessageLevel
from ..core.exceptions import ValidationError
from ..container import Container

METER_FIELD_PREFIX = "meter-"
RESET_FIELD = "meters_reset"


def register(app: Flask, container: Container) -> None:
    def _notify(text: str, level: MessageLevel = MessageLevel.SUCCESS) -> None:
        set_status(session, text, level, seconds=app.config["STATUS_MESSAGE_SECONDS"])

    def _meters_from_form() -> dict[str, str]:
        return {
            key[len(METER_FIELD_PREFIX):]: value
            for key, value in request.form.items()
            if key.startswith(METER_FIELD_PREFIX)
        }

    def _reset_from_form() -> bool:
        return request.form.get(RESET_FIELD) == "1"

    def _render(sheet):
        return render_template(
            "daily_log.html",
            sheet=sheet,
            has_products=bool(sheet.lines),
            name_history=container.daily_log_service.name_history(),
            max_date=to_storage_date(today_local()),
            active_page="daily_log",
        )

    @app.route("/", methods=["GET"], endpoint="daily_log")
    def daily_log():
        svc = container.daily_log_service
        employee_name = request.args.get("employee_name", "")
        try:
            sheet = svc.load_sheet(date=request.args.get("date"), employee_name=employee_name)
        except ValidationError as e:
            _notify(str(e), MessageLevel.WARNING)
            sheet = svc.load_sheet(date=None, employee_name=employee_name)
        return _render(sheet)

    @app.route("/daily-log/calculate", methods=["POST"], endpoint="daily_log_calculate")
    def daily_log_calculate():
        svc = container.daily_log_service
        try:
            sheet = svc.compute_sheet(
                date=request.form.get("date"),
                employee_name=request.form.get("employee_name", ""),
                meters=_meters_from_form(),
                reset=_reset_from_form(),
            )
        except ValidationError as e:
            _notify(str(e), MessageLevel.WARNING)
            return redirect(url_for("daily_log"))
        return _render(sheet)

    @app.route("/daily-log/reset", methods=["POST"], endpoint="daily_log_reset")
    def daily_log_reset():
        svc = container.daily_log_service
        try:
            sheet = svc.reset_meters(date=request.form.get("date"), employee_name=request.form.get("employee_name", ""))
        except ValidationError as e:
            _notify(str(e), MessageLevel.WARNING)
            return redirect(url_for("daily_log"))
        _notify("All meters reset.", MessageLevel.INFO)
        return _render(sheet)

    @app.route("/daily-log/save", methods=["POST"], endpoint="daily_log_save")
    def daily_log_save():
        svc = container.daily_log_service
        date_s = request.form.get("date")
        employee_name = request.form.get("employee_name", "")
        meters = _meters_from_form()
        reset = _reset_from_form()
        try:
            sheet = svc.save_entries(
                date=date_s, employee_name=employee_name, meters=meters, keep_stored=not reset
            )
            _notify("Entries saved.")
            return redirect(url_for("daily_log", date=sheet.date, employee_name=sheet.employee_name))
        except ValidationError as e:
            _notify(str(e), MessageLevel.WARNING)
        except Exception:
            app.logger.exception("Saving daily log failed")
            _notify("System error while saving entries.", MessageLevel.DANGER)

        try:
            sheet = svc.compute_sheet(date=date_s, employee_name=employee_name, meters=meters, reset=reset)
        except ValidationError:
            sheet = svc.compute_sheet(date=None, employee_name=employee_name, meters=meters, reset=reset)
        return _render(sheet)
