"""
Services - Acceso a la API remota por recurso
"""
from .auth_service import AuthService
from .category_service import CategoryService
from .item_service import ItemService, StockStatus
from .stock_movement_service import StockMovementService
from .dashboard_service import DashboardService

__all__ = [
    'AuthService',
    'CategoryService',
    'ItemService',
    'StockStatus',
    'StockMovementService',
    'DashboardService'
]
