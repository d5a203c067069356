"""
Schemas Item - Lectura y validación de productos
"""
from marshmallow import fields, post_load, validate

from inventario.models.item import Item
from inventario.schemas.base import ApiSchema, InputSchema
from inventario.schemas.category import CategorySchema, NAME_REQUIRED


class ItemSchema(ApiSchema):
    """Schema de lectura de un producto"""
    id = fields.Int(required=True)
    name = fields.Str(required=True)
    description = fields.Str(allow_none=True, load_default=None)
    sku = fields.Str(allow_none=True, load_default=None)
    current_stock = fields.Int(data_key='currentStock', load_default=0)
    min_stock = fields.Int(data_key='minStock', load_default=0)
    price = fields.Float(allow_none=True, load_default=None)
    category_id = fields.Int(data_key='categoryId', allow_none=True, load_default=None)
    category = fields.Nested(CategorySchema, allow_none=True, load_default=None)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True, load_default=None)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True, load_default=None)

    @post_load
    def make_item(self, data, **kwargs):
        return Item(**data)


class ItemUpdateSchema(InputSchema):
    """Schema para la actualización parcial de un producto"""
    name = fields.Str(error_messages={'null': NAME_REQUIRED})
    description = fields.Str(allow_none=True)
    sku = fields.Str(allow_none=True, validate=validate.Length(max=50))
    current_stock = fields.Int(data_key='currentStock', validate=validate.Range(min=0))
    min_stock = fields.Int(data_key='minStock', validate=validate.Range(min=0))
    price = fields.Float(allow_none=True, validate=validate.Range(min=0))
    category_id = fields.Int(data_key='categoryId', allow_none=True)


class ItemCreateSchema(ItemUpdateSchema):
    """Schema para la creación de un producto"""
    name = fields.Str(
        required=True,
        error_messages={'required': NAME_REQUIRED, 'null': NAME_REQUIRED}
    )
