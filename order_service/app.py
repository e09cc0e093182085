from flask import Flask, Response, request, jsonify
import logging
from typing import Optional

from werkzeug.routing import RequestRedirect

from . import config
from .database import OrderDatabase
from .fixtures import seed_orders
from .models import Order, OrderDecodeError

logger = logging.getLogger(__name__)

JSON_MIMETYPE = 'application/json'


def _text(body: str, status: int) -> Response:
    """Plain-text body sent with the JSON content type every response carries"""
    return Response(body, status=status, mimetype=JSON_MIMETYPE)


def not_found() -> Response:
    return _text("not found", 404)


def internal_server_error() -> Response:
    return _text("internal server error", 500)


def decode_error(status: int) -> Response:
    if status == 500:
        return internal_server_error()
    return _text("bad request", 400)


def _decode_order() -> Order:
    data = request.get_json(force=True, silent=True)
    return Order.from_json(data)


def create_app(database: Optional[OrderDatabase] = None,
               decode_error_status: Optional[int] = None) -> Flask:
    """
    Build the order service app.

    Without a database the store is seeded with the fixture orders.
    decode_error_status picks 400 or 500 for bodies that are not a valid
    order and defaults to DECODE_ERROR_STATUS.
    """
    app = Flask(__name__)
    db = database if database is not None else OrderDatabase(seed_orders())
    bad_body_status = decode_error_status or config.DECODE_ERROR_STATUS
    if bad_body_status not in (400, 500):
        raise ValueError(f"decode_error_status must be 400 or 500, got {bad_body_status}")
    app.extensions['order_database'] = db

    @app.before_request
    def reject_redirects():
        # trailing-slash redirects count as unknown paths
        if isinstance(request.routing_exception, RequestRedirect):
            logger.warning(f"No route for {request.method} {request.path}")
            return not_found()

    @app.errorhandler(404)
    @app.errorhandler(405)
    def unmatched_route(e):
        logger.warning(f"No route for {request.method} {request.path}")
        return not_found()

    @app.route('/health', methods=['GET'], provide_automatic_options=False)
    def health():
        """Health check endpoint"""
        return jsonify({"status": "healthy"}), 200

    @app.route('/orders/', methods=['GET'], provide_automatic_options=False)
    def list_orders():
        """List all orders"""
        try:
            orders = db.get_all_orders()
            logger.info(f"Listing {len(orders)} orders")
            return jsonify([order.to_json() for order in orders]), 200
        except Exception as e:
            logger.error(f"Error in list_orders: {e}")
            return internal_server_error()

    @app.route('/orders/<order_id>', methods=['GET'], provide_automatic_options=False)
    def get_order(order_id):
        """Get a specific order by ID"""
        try:
            order = db.get_order(order_id)
            if order is None:
                logger.warning(f"Order {order_id} not found")
                return _text("user not found", 404)
            return jsonify(order.to_json()), 200
        except Exception as e:
            logger.error(f"Error in get_order: {e}")
            return internal_server_error()

    @app.route('/orders/', methods=['POST'], provide_automatic_options=False)
    def create_order():
        """
        Create an order, overwriting any order that already has its id
        """
        try:
            order = _decode_order()
        except OrderDecodeError as e:
            logger.warning(f"Rejected order body in create_order: {e}")
            return decode_error(bad_body_status)

        try:
            db.save_order(order)
            logger.info(f"Order {order.id!r} saved")
            return jsonify(order.to_json()), 200
        except Exception as e:
            logger.error(f"Error in create_order: {e}")
            return internal_server_error()

    @app.route('/order/orders/', methods=['PUT'], provide_automatic_options=False)
    def update_order():
        """
        Replace the order with the same id.
        Echoes the body even when no such order exists; nothing is created then.
        """
        try:
            order = _decode_order()
        except OrderDecodeError as e:
            logger.warning(f"Rejected order body in update_order: {e}")
            return decode_error(bad_body_status)

        try:
            if db.update_order(order):
                logger.info(f"Order {order.id!r} updated")
            else:
                logger.info(f"Order {order.id!r} not in store, nothing updated")
            return jsonify(order.to_json()), 200
        except Exception as e:
            logger.error(f"Error in update_order: {e}")
            return internal_server_error()

    return app
