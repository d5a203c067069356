"""
Modelo Item - Productos con su stock actual
"""


class Item:
    """
    Producto del inventario.
    current_stock y min_stock son enteros no negativos; min_stock es el
    umbral de aviso de stock bajo.
    """

    def __init__(self, id, name, description=None, sku=None, current_stock=0,
                 min_stock=0, price=None, category_id=None, category=None,
                 created_at=None, updated_at=None):
        self.id = id
        self.name = name
        self.description = description
        self.sku = sku
        self.current_stock = current_stock
        self.min_stock = min_stock
        self.price = price
        self.category_id = category_id
        self.category = category
        self.created_at = created_at
        self.updated_at = updated_at

    def __repr__(self):
        return f'<Item {self.name} Stock:{self.current_stock}>'

    @property
    def is_out_of_stock(self):
        return self.current_stock == 0

    @property
    def is_low_stock(self):
        return self.current_stock <= self.min_stock
