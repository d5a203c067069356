"""
Páginas Items - Inventario y detalle de producto
"""
from flask import current_app
from marshmallow import ValidationError

from . import pages
from inventario.core.errors import ApiError
from inventario.core.security import login_required
from inventario.core.utils import (
    api_response, error_response, get_api_client, get_form_data, get_search_term,
    get_type_filter, validation_response
)
from inventario.schemas.item import ItemSchema, ItemCreateSchema, ItemUpdateSchema
from inventario.schemas.stock import StockMovementSchema
from inventario.services.dashboard_service import DashboardService
from inventario.services.item_service import ItemService
from inventario.services.stock_movement_service import StockMovementService

# Schemas instances
item_schema = ItemSchema()
items_schema = ItemSchema(many=True)
movements_schema = StockMovementSchema(many=True)


@pages.route('/items', methods=['GET'])
@login_required
def list_items():
    """
    Inventario
    ---
    tags:
      - Items
    summary: Productos filtrados por nombre o SKU
    parameters:
      - name: q
        in: query
        type: string
    responses:
      200:
        description: Productos con su estado de stock
    """
    term = get_search_term()

    try:
        items = ItemService(get_api_client()).get_all()
    except ApiError as err:
        current_app.logger.error(f"Error cargando productos: {err!r}")
        return error_response(err, 'Error al cargar los productos')

    filtered = ItemService.filter_items(items, term)
    rows = []
    for item, dumped in zip(filtered, items_schema.dump(filtered)):
        dumped['stockStatus'] = ItemService.stock_status(item)
        rows.append(dumped)

    return api_response(data={
        'items': rows,
        'count': len(filtered),
        'total': len(items),
        'search': term
    })


@pages.route('/items/low-stock', methods=['GET'])
@login_required
def low_stock_items():
    """
    Productos con stock bajo
    ---
    tags:
      - Items
    responses:
      200:
        description: Productos con currentStock <= minStock
    """
    try:
        items = ItemService(get_api_client()).get_low_stock()
    except ApiError as err:
        current_app.logger.error(f"Error cargando stock bajo: {err!r}")
        return error_response(err, 'Error al cargar los productos')

    return api_response(data={'items': items_schema.dump(items), 'count': len(items)})


@pages.route('/items/stats', methods=['GET'])
@login_required
def items_stats():
    """
    Estadísticas de productos
    ---
    tags:
      - Items
    responses:
      200:
        description: Estadísticas calculadas por la API
    """
    try:
        stats = ItemService(get_api_client()).get_stats()
    except ApiError as err:
        current_app.logger.error(f"Error cargando estadísticas de productos: {err!r}")
        return error_response(err, 'Error al cargar las estadísticas')

    return api_response(data={'stats': stats})


@pages.route('/items', methods=['POST'])
@login_required
def create_item():
    """
    Crear producto
    ---
    tags:
      - Items
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - name
          properties:
            name:
              type: string
            description:
              type: string
            sku:
              type: string
            currentStock:
              type: integer
            minStock:
              type: integer
            price:
              type: number
            categoryId:
              type: integer
    responses:
      201:
        description: Producto creado
      400:
        description: Datos inválidos
    """
    try:
        data = ItemCreateSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    try:
        item = ItemService(get_api_client()).create(data)
    except ApiError as err:
        current_app.logger.error(f"Error guardando producto: {err!r}")
        return error_response(err, 'Error al guardar el producto')

    return api_response(data={'item': item_schema.dump(item)}, message='Producto creado', status_code=201)


@pages.route('/items/<int:item_id>', methods=['GET'])
@login_required
def item_detail(item_id):
    """
    Detalle de producto
    ---
    tags:
      - Items
    summary: Producto, historial de movimientos y estadísticas
    description: |
      El producto y su historial se piden a la vez a la API.
      El historial se filtra por tipo (ALL, IN, OUT) y por razón o usuario;
      las estadísticas se calculan sobre el historial completo.
    parameters:
      - name: item_id
        in: path
        type: integer
        required: true
      - name: type
        in: query
        type: string
        enum: [ALL, IN, OUT]
      - name: q
        in: query
        type: string
    responses:
      200:
        description: Detalle del producto
      404:
        description: Producto no encontrado
    """
    movement_type = get_type_filter()
    term = get_search_term()

    try:
        item, movements = DashboardService(get_api_client()).item_detail(item_id)
    except ApiError as err:
        current_app.logger.error(f"Error cargando datos del producto {item_id}: {err!r}")
        return api_response(message='Error al cargar los datos del producto', status_code=err.http_status)

    filtered = StockMovementService.filter_movements(movements, movement_type, term)

    return api_response(data={
        'item': item_schema.dump(item),
        'stock_status': ItemService.stock_status(item),
        'movements': movements_schema.dump(filtered),
        'stats': StockMovementService.compute_stats(movements),
        'filters': {'type': movement_type, 'q': term}
    })


@pages.route('/items/<int:item_id>', methods=['PATCH'])
@login_required
def update_item(item_id):
    """
    Modificar producto
    ---
    tags:
      - Items
    parameters:
      - name: item_id
        in: path
        type: integer
        required: true
      - in: body
        name: body
        schema:
          type: object
    responses:
      200:
        description: Producto actualizado
      400:
        description: Datos inválidos
    """
    try:
        data = ItemUpdateSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    try:
        item = ItemService(get_api_client()).update(item_id, data)
    except ApiError as err:
        current_app.logger.error(f"Error guardando producto {item_id}: {err!r}")
        return error_response(err, 'Error al guardar el producto')

    return api_response(data={'item': item_schema.dump(item)}, message='Producto actualizado')


@pages.route('/items/<int:item_id>', methods=['DELETE'])
@login_required
def delete_item(item_id):
    """
    Eliminar producto
    ---
    tags:
      - Items
    parameters:
      - name: item_id
        in: path
        type: integer
        required: true
    responses:
      200:
        description: Producto eliminado
    """
    try:
        ItemService(get_api_client()).delete(item_id)
    except ApiError as err:
        current_app.logger.error(f"Error eliminando producto {item_id}: {err!r}")
        return error_response(err, 'Error al eliminar el producto')

    return api_response(data={'id': item_id}, message='Producto eliminado')
