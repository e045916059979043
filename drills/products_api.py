"""An in-memory products inventory service over HTTP."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import count
from typing import Any

from flask import Flask, jsonify, request

DEFAULT_PORT = 8081
NOT_FOUND = "Product not found"


@dataclass
class _Product:
    id: str = ""
    code: str = ""
    name: str = ""
    price: float = 0.0

    def to_json(self) -> dict[str, Any]:
        """Serialise, leaving out fields that hold their empty value."""
        fields = {"id": self.id, "code": self.code, "name": self.name, "price": self.price}
        return {key: value for key, value in fields.items() if value}


def _payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def _price(payload: dict[str, Any]) -> float:
    value = payload.get("price")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def _product_from(product_id: str, payload: dict[str, Any]) -> _Product:
    return _Product(
        id=product_id,
        code=_text(payload, "code"),
        name=_text(payload, "name"),
        price=_price(payload),
    )


def create_app() -> Flask:
    """Build the application with its seed product."""
    app = Flask(__name__)
    products = [_Product(id="1", code="Code 1", name="Product 1", price=1.0)]
    next_id = count(2)

    def index_of(product_id: str) -> int | None:
        return next(
            (index for index, product in enumerate(products) if product.id == product_id),
            None,
        )

    def not_found():
        return jsonify({"error": NOT_FOUND}), 404

    def listing():
        return jsonify([product.to_json() for product in products])

    @app.get("/health")
    def health_check():
        return "The server is working"

    @app.get("/products")
    def get_all():
        return listing()

    @app.get("/inventory")
    def get_inventory():
        return listing()

    @app.get("/products/<product_id>")
    def get_product(product_id: str):
        index = index_of(product_id)
        if index is None:
            return not_found()
        return jsonify(products[index].to_json())

    @app.post("/products")
    def create_product():
        product = _product_from(str(next(next_id)), _payload())
        products.append(product)
        return jsonify(product.to_json()), 201

    @app.put("/products/<product_id>")
    def update_product(product_id: str):
        index = index_of(product_id)
        if index is None:
            return not_found()
        products[index] = _product_from(product_id, _payload())
        return jsonify(products[index].to_json())

    @app.delete("/products/<product_id>")
    def delete_product(product_id: str):
        remaining = [product for product in products if product.id != product_id]
        if len(remaining) == len(products):
            return not_found()
        products[:] = remaining
        return "", 204

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve the products API."""
    parser = argparse.ArgumentParser(description="Serve the products API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)