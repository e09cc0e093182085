"""
Seed orders loaded into the store at startup
"""
from typing import List

from .models import Order


def seed_orders() -> List[Order]:
    return [
        Order(id='1', name='Rahul', order_items='veg pulav, biryani',
              total_items='2', payment='Done', table_number='11'),
        Order(id='2', name='Mayur', order_items='Pav Bhaji, manchurian',
              total_items='2', payment='Done', table_number='123'),
        Order(id='3', name='Nikhil', order_items='veg pulav',
              total_items='1', payment='Done', table_number='12'),
        Order(id='4', name='Sanajana', order_items='chicken khima,roti',
              total_items='2', payment='pending', table_number='1234'),
        Order(id='5', name='rohit', order_items='pulav',
              total_items='1', payment='pending', table_number='1'),
    ]
