"""
Service Category - CRUD de categorías
"""
from inventario.core.utils import matches_term
from inventario.schemas.category import CategorySchema, CategoryCreateSchema, CategoryUpdateSchema


class CategoryService:
    """Servicio para /categories"""

    def __init__(self, client):
        self.client = client

    def get_all(self):
        return self.client.load(CategorySchema(many=True), self.client.get('/categories'))

    def get_one(self, category_id):
        return self.client.load(CategorySchema(), self.client.get(f'/categories/{category_id}'))

    def create(self, data):
        payload = CategoryCreateSchema().dump(data)
        return self.client.load(CategorySchema(), self.client.post('/categories', json=payload))

    def update(self, category_id, data):
        payload = CategoryUpdateSchema().dump(data)
        return self.client.load(CategorySchema(), self.client.patch(f'/categories/{category_id}', json=payload))

    def delete(self, category_id):
        self.client.delete(f'/categories/{category_id}')

    @staticmethod
    def filter_categories(categories, term):
        """Categorías cuyo nombre o descripción contienen el término"""
        return [c for c in categories if matches_term(term, c.name, c.description)]
