import threading

import pytest
from werkzeug.serving import make_server

from order_service import create_app, OrderDatabase
from order_service.fixtures import seed_orders


class LiveServer:
    """Runs an order service app on an ephemeral port in a background thread"""

    def __init__(self, app):
        self.app = app
        self.database = app.extensions['order_database']
        self.server = make_server('127.0.0.1', 0, app, threaded=True)
        self.url = f"http://127.0.0.1:{self.server.server_port}"
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.thread.join(timeout=5)


def _serve(app):
    live = LiveServer(app)
    live.start()
    return live


@pytest.fixture
def server():
    live = _serve(create_app(OrderDatabase(seed_orders()), decode_error_status=400))
    yield live
    live.stop()


@pytest.fixture
def legacy_server():
    """Reports undecodable bodies as 500, as the service originally did"""
    live = _serve(create_app(OrderDatabase(seed_orders()), decode_error_status=500))
    yield live
    live.stop()
