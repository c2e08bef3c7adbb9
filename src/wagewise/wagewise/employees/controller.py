from __future__ import annotations

from flask import Flask, redirect, render_template, request, session, url_for

from ..common.pending import arm, disarm, take_if_armed
from ..common.status import set_status
from ..core.enums import ClassType, MessageLevel, PendingKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _notify(text: str, level: MessageLevel = MessageLevel.SUCCESS) -> None:
        set_status(session, text, level, seconds=app.config["STATUS_MESSAGE_SECONDS"])

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        return render_template(
            "employees.html",
            employees=container.employee_service.list_employees(),
            class_types=[c.value for c in ClassType],
            editing_id=request.args.get("edit"),
            active_page="employees",
        )

    @app.route("/employees/add", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            employee = container.employee_service.add_employee(
                name=request.form.get("name", ""),
                phone=request.form.get("phone", ""),
                class_type=request.form.get("class_type") or None,
            )
            _notify(f"Added {employee.name}.")
        except ValidationError as e:
            _notify(str(e), MessageLevel.DANGER)
        except Exception:
            app.logger.exception("Adding employee failed")
            _notify("System error while adding employee.", MessageLevel.DANGER)
        return redirect(url_for("employees"))

    @app.route("/employees/<employee_id>/edit", methods=["POST"], endpoint="edit_employee")
    def edit_employee(employee_id: str):
        try:
            container.employee_service.edit_employee(
                employee_id,
                name=request.form.get("name", ""),
                phone=request.form.get("phone", ""),
                class_type=request.form.get("class_type") or None,
            )
            _notify("Employee updated.")
        except ValidationError as e:
            _notify(str(e), MessageLevel.DANGER)
            return redirect(url_for("employees", edit=employee_id))
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        return redirect(url_for("employees"))

    @app.route("/employees/<employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        arm(session, PendingKind.DELETE_EMPLOYEE, employee_id)
        return redirect(url_for("employees"))

    @app.route("/employees/<employee_id>/delete/confirm", methods=["POST"], endpoint="confirm_delete_employee")
    def confirm_delete_employee(employee_id: str):
        if not take_if_armed(session, PendingKind.DELETE_EMPLOYEE, employee_id):
            return redirect(url_for("employees"))
        try:
            container.employee_service.delete_employee(employee_id)
            _notify("Employee deleted.")
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        return redirect(url_for("employees"))

    @app.route("/employees/cancel", methods=["POST"], endpoint="cancel_employee_action")
    def cancel_employee_action():
        disarm(session)
        return redirect(url_for("employees"))
