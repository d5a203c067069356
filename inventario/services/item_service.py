"""
Service Item - CRUD de productos y estado de stock
"""
from inventario.core.utils import matches_term
from inventario.schemas.item import ItemSchema, ItemCreateSchema, ItemUpdateSchema


class StockStatus:
    """Estados de stock de un producto"""
    OUT = 'out'
    LOW = 'low'
    AVAILABLE = 'available'

    LABELS = {
        OUT: 'Agotado',
        LOW: 'Bajo Stock',
        AVAILABLE: 'Disponible',
    }


class ItemService:
    """Servicio para /items"""

    def __init__(self, client):
        self.client = client

    def get_all(self):
        return self.client.load(ItemSchema(many=True), self.client.get('/items'))

    def get_one(self, item_id):
        return self.client.load(ItemSchema(), self.client.get(f'/items/{item_id}'))

    def get_low_stock(self):
        return self.client.load(ItemSchema(many=True), self.client.get('/items/low-stock'))

    def get_stats(self):
        return self.client.get('/items/stats')

    def create(self, data):
        payload = ItemCreateSchema().dump(data)
        return self.client.load(ItemSchema(), self.client.post('/items', json=payload))

    def update(self, item_id, data):
        payload = ItemUpdateSchema().dump(data)
        return self.client.load(ItemSchema(), self.client.patch(f'/items/{item_id}', json=payload))

    def delete(self, item_id):
        self.client.delete(f'/items/{item_id}')

    @staticmethod
    def filter_items(items, term):
        """Productos cuyo nombre o SKU contienen el término"""
        return [i for i in items if matches_term(term, i.name, i.sku)]

    @staticmethod
    def find(items, item_id):
        return next((i for i in items if i.id == item_id), None)

    @staticmethod
    def stock_status(item):
        """
        Estado de stock: agotado si no queda nada, bajo si no supera el
        mínimo, disponible en otro caso.
        """
        if item.is_out_of_stock:
            status = StockStatus.OUT
        elif item.is_low_stock:
            status = StockStatus.LOW
        else:
            status = StockStatus.AVAILABLE
        return {'status': status, 'label': StockStatus.LABELS[status]}
