"""
Service Dashboard - Agregados de las pantallas de resumen y de detalle
"""
from concurrent.futures import ThreadPoolExecutor

from inventario.services.item_service import ItemService
from inventario.services.stock_movement_service import StockMovementService


class DashboardService:
    """Servicio que compone varias lecturas de la API"""

    def __init__(self, client):
        self.client = client
        self.items = ItemService(client)
        self.movements = StockMovementService(client)

    def item_detail(self, item_id):
        """
        Carga el producto y su historial de movimientos.
        Las dos peticiones se lanzan a la vez y se esperan ambas;
        el primer error se propaga.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            item_future = executor.submit(self.items.get_one, item_id)
            movements_future = executor.submit(self.movements.get_by_item, item_id)
            item = item_future.result()
            movements = movements_future.result()

        return item, movements

    def overview(self):
        """
        Resumen del dashboard: productos con stock bajo y estadísticas
        de productos y movimientos.
        """
        low_stock = self.items.get_low_stock()

        return {
            'low_stock': low_stock,
            'low_stock_count': len(low_stock),
            'items_stats': self.items.get_stats(),
            'movements_stats': self.movements.get_stats()
        }
