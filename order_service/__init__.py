"""
In-memory order tracking service
"""
from .app import create_app
from .database import OrderDatabase
from .models import Order, OrderDecodeError

__all__ = ['create_app', 'OrderDatabase', 'Order', 'OrderDecodeError']
