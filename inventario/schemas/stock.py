"""
Schemas Stock - Movimientos de stock
"""
from marshmallow import fields, post_load, validate

from inventario.models.stock import MovementType, StockMovement, MovementItem, MovementUser
from inventario.schemas.base import ApiSchema, InputSchema

ITEM_REQUIRED = 'Debe seleccionar un producto'
QUANTITY_POSITIVE = 'La cantidad debe ser mayor a 0'


class MovementItemSchema(ApiSchema):
    id = fields.Int(required=True)
    name = fields.Str(required=True)
    sku = fields.Str(allow_none=True, load_default=None)

    @post_load
    def make_item(self, data, **kwargs):
        return MovementItem(**data)


class MovementUserSchema(ApiSchema):
    id = fields.Int(required=True)
    email = fields.Str(required=True)
    display_name = fields.Str(data_key='displayName', allow_none=True, load_default=None)

    @post_load
    def make_user(self, data, **kwargs):
        return MovementUser(**data)


class StockMovementSchema(ApiSchema):
    """Schema de lectura de un movimiento de stock"""
    id = fields.Int(required=True)
    item_id = fields.Int(data_key='itemId', required=True)
    user_id = fields.Int(data_key='userId', allow_none=True, load_default=None)
    type = fields.Enum(MovementType, by_value=True, required=True)
    quantity = fields.Int(required=True)
    reason = fields.Str(allow_none=True, load_default=None)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True, load_default=None)
    item = fields.Nested(MovementItemSchema, allow_none=True, load_default=None)
    user = fields.Nested(MovementUserSchema, allow_none=True, load_default=None)

    @post_load
    def make_movement(self, data, **kwargs):
        return StockMovement(**data)


class StockMovementCreateSchema(InputSchema):
    """Schema para el registro de un movimiento de stock"""
    item_id = fields.Int(
        data_key='itemId',
        required=True,
        error_messages={'required': ITEM_REQUIRED, 'null': ITEM_REQUIRED, 'invalid': ITEM_REQUIRED}
    )
    type = fields.Enum(MovementType, by_value=True, load_default=MovementType.IN)
    quantity = fields.Int(
        required=True,
        validate=validate.Range(min=1, error=QUANTITY_POSITIVE),
        error_messages={'required': QUANTITY_POSITIVE, 'null': QUANTITY_POSITIVE, 'invalid': QUANTITY_POSITIVE}
    )
    reason = fields.Str(allow_none=True)
