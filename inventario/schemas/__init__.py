"""
Schemas Marshmallow - Lectura de la API y validación de formularios
"""
from .user import UserSchema, AuthResponseSchema, LoginSchema, RegisterSchema
from .category import CategorySchema, CategoryCreateSchema, CategoryUpdateSchema
from .item import ItemSchema, ItemCreateSchema, ItemUpdateSchema
from .stock import StockMovementSchema, StockMovementCreateSchema

__all__ = [
    'UserSchema', 'AuthResponseSchema', 'LoginSchema', 'RegisterSchema',
    'CategorySchema', 'CategoryCreateSchema', 'CategoryUpdateSchema',
    'ItemSchema', 'ItemCreateSchema', 'ItemUpdateSchema',
    'StockMovementSchema', 'StockMovementCreateSchema'
]
