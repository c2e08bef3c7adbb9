from __future__ import annotations

from flask import Flask, redirect, render_template, request, session, url_for

from ..common.pending import arm, disarm, take_if_armed
from ..common.status import set_status
from ..core.enums import MessageLevel, PendingKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _notify(text: str, level: MessageLevel = MessageLevel.SUCCESS) -> None:
        set_status(session, text, level, seconds=app.config["STATUS_MESSAGE_SECONDS"])

    def _render(*, error: str = "", name: str = "", rate: str = ""):
        return render_template(
            "products.html",
            products=container.product_service.list_products(),
            error=error,
            form_name=name,
            form_rate=rate,
            active_page="products",
        )

    @app.route("/products", methods=["GET"], endpoint="products")
    def products():
        return _render()

    @app.route("/products/add", methods=["POST"], endpoint="add_product")
    def add_product():
        name = request.form.get("name", "")
        rate = request.form.get("rate", "")
        try:
            product = container.product_service.add_product(name=name, rate=rate)
            _notify(f"Added {product.name}.")
            return redirect(url_for("products"))
        except ValidationError as e:
            # One message per submit; it replaces whatever was shown before.
            return _render(error=str(e), name=name, rate=rate), 400
        except Exception:
            app.logger.exception("Adding product failed")
            return _render(error="System error while adding product.", name=name, rate=rate), 500

    @app.route("/products/<product_id>/delete", methods=["POST"], endpoint="delete_product")
    def delete_product(product_id: str):
        arm(session, PendingKind.DELETE_PRODUCT, product_id)
        return redirect(url_for("products"))

    @app.route("/products/<product_id>/delete/confirm", methods=["POST"], endpoint="confirm_delete_product")
    def confirm_delete_product(product_id: str):
        if not take_if_armed(session, PendingKind.DELETE_PRODUCT, product_id):
            return redirect(url_for("products"))
        try:
            container.product_service.delete_product(product_id)
            _notify("Product deleted.")
        except DomainError as e:
            _notify(str(e), MessageLevel.WARNING)
        return redirect(url_for("products"))

    @app.route("/products/cancel", methods=["POST"], endpoint="cancel_product_action")
    def cancel_product_action():
        disarm(session)
        return redirect(url_for("products"))
