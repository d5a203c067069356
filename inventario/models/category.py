"""
Modelo Category - Categorías de productos
"""


class Category:

    def __init__(self, id, name, description=None, created_at=None, updated_at=None):
        self.id = id
        self.name = name
        self.description = description
        self.created_at = created_at
        self.updated_at = updated_at

    def __repr__(self):
        return f'<Category {self.name}>'
