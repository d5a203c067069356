"""
Modelos - Copias en memoria de las entidades de la API
"""
from .user import User, AuthResponse
from .category import Category
from .item import Item
from .stock import MovementType, StockMovement, MovementItem, MovementUser

__all__ = [
    'User', 'AuthResponse', 'Category', 'Item',
    'MovementType', 'StockMovement', 'MovementItem', 'MovementUser'
]
