"""
Service StockMovement - Entradas/salidas de stock y sus totales
"""
from inventario.core.utils import matches_term
from inventario.models.stock import MovementType
from inventario.schemas.stock import StockMovementSchema, StockMovementCreateSchema


class StockMovementService:
    """Servicio para /stock-movements"""

    def __init__(self, client):
        self.client = client

    def get_all(self):
        return self.client.load(StockMovementSchema(many=True), self.client.get('/stock-movements'))

    def get_by_item(self, item_id):
        data = self.client.get(f'/stock-movements/by-item/{item_id}')
        return self.client.load(StockMovementSchema(many=True), data)

    def get_my_movements(self):
        data = self.client.get('/stock-movements/my-movements')
        return self.client.load(StockMovementSchema(many=True), data)

    def get_stats(self):
        return self.client.get('/stock-movements/stats')

    def create(self, data):
        payload = StockMovementCreateSchema().dump(data)
        return self.client.load(StockMovementSchema(), self.client.post('/stock-movements', json=payload))

    @staticmethod
    def check_availability(item, movement_type, quantity):
        """
        Verifica que una salida no supere el stock disponible.
        Lanza ValueError si no hay suficiente stock.
        """
        if item is None or MovementType(movement_type) != MovementType.OUT:
            return

        if quantity > item.current_stock:
            raise ValueError(f'No hay suficiente stock. Disponible: {item.current_stock} unidades')

    @staticmethod
    def filter_movements(movements, movement_type='ALL', term=''):
        """Filtra por tipo y por razón / nombre / email del usuario"""
        result = []
        for movement in movements:
            if movement_type != 'ALL' and movement.type.value != movement_type:
                continue
            user = movement.user
            if not matches_term(
                term,
                movement.reason,
                user.display_name if user else None,
                user.email if user else None
            ):
                continue
            result.append(movement)
        return result

    @staticmethod
    def compute_stats(movements):
        """Totales de entradas y salidas"""
        entries = [m for m in movements if m.is_entry]
        exits = [m for m in movements if not m.is_entry]
        total_entries = sum(m.quantity for m in entries)
        total_exits = sum(m.quantity for m in exits)

        return {
            'total_entries': total_entries,
            'total_exits': total_exits,
            'entries_count': len(entries),
            'exits_count': len(exits),
            'balance': total_entries - total_exits
        }
