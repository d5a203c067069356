"""
Schemas Category - Lectura y validación de categorías
"""
from marshmallow import fields, post_load

from inventario.models.category import Category
from inventario.schemas.base import ApiSchema, InputSchema

NAME_REQUIRED = 'El nombre es obligatorio'


class CategorySchema(ApiSchema):
    """Schema de lectura de una categoría"""
    id = fields.Int(required=True)
    name = fields.Str(required=True)
    description = fields.Str(allow_none=True, load_default=None)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True, load_default=None)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True, load_default=None)

    @post_load
    def make_category(self, data, **kwargs):
        return Category(**data)


class CategoryCreateSchema(InputSchema):
    """Schema para la creación de una categoría"""
    name = fields.Str(
        required=True,
        error_messages={'required': NAME_REQUIRED, 'null': NAME_REQUIRED}
    )
    description = fields.Str(allow_none=True)


class CategoryUpdateSchema(InputSchema):
    """Schema para la actualización parcial de una categoría"""
    name = fields.Str(error_messages={'null': NAME_REQUIRED})
    description = fields.Str(allow_none=True)
