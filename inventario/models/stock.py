"""
Modelo StockMovement - Entradas y salidas de stock
"""
from enum import Enum


class MovementType(str, Enum):
    """Tipos de movimiento de stock"""
    IN = 'IN'
    OUT = 'OUT'


class MovementItem:
    """Resumen del producto incluido en un movimiento"""

    def __init__(self, id, name, sku=None):
        self.id = id
        self.name = name
        self.sku = sku

    def __repr__(self):
        return f'<MovementItem {self.name}>'


class MovementUser:
    """Resumen del usuario que registró un movimiento"""

    def __init__(self, id, email, display_name=None):
        self.id = id
        self.email = email
        self.display_name = display_name

    def __repr__(self):
        return f'<MovementUser {self.email}>'


class StockMovement:
    """Movimiento registrado: cantidad positiva de tipo IN o OUT"""

    def __init__(self, id, item_id, type, quantity, user_id=None, reason=None,
                 created_at=None, item=None, user=None):
        self.id = id
        self.item_id = item_id
        self.user_id = user_id
        self.type = MovementType(type)
        self.quantity = quantity
        self.reason = reason
        self.created_at = created_at
        self.item = item
        self.user = user

    def __repr__(self):
        return f'<StockMovement {self.type.value} Item:{self.item_id} Qty:{self.quantity}>'

    @property
    def is_entry(self):
        return self.type == MovementType.IN
