"""
Páginas Movements - Historial y formulario de entradas/salidas
"""
from flask import current_app, redirect, request, url_for
from marshmallow import ValidationError

from . import pages
from inventario.core.errors import ApiError
from inventario.core.security import login_required
from inventario.core.utils import (
    api_response, error_response, get_api_client, get_form_data, get_search_term,
    get_type_filter, validation_response
)
from inventario.models.stock import MovementType
from inventario.schemas.item import ItemSchema
from inventario.schemas.stock import StockMovementSchema, StockMovementCreateSchema
from inventario.services.item_service import ItemService
from inventario.services.stock_movement_service import StockMovementService

# Schemas instances
movements_schema = StockMovementSchema(many=True)
items_schema = ItemSchema(many=True)


def _load_items():
    """Productos para el selector; un fallo deja la lista vacía"""
    try:
        return ItemService(get_api_client()).get_all()
    except ApiError as err:
        current_app.logger.error(f"Error cargando items: {err!r}")
        return []


def _history_payload(movements):
    movement_type = get_type_filter()
    term = get_search_term()
    filtered = StockMovementService.filter_movements(movements, movement_type, term)
    return {
        'movements': movements_schema.dump(filtered),
        'count': len(filtered),
        'stats': StockMovementService.compute_stats(movements),
        'filters': {'type': movement_type, 'q': term}
    }


@pages.route('/movements', methods=['GET'])
@login_required
def list_movements():
    """
    Historial de movimientos
    ---
    tags:
      - Movements
    parameters:
      - name: type
        in: query
        type: string
        enum: [ALL, IN, OUT]
      - name: q
        in: query
        type: string
    responses:
      200:
        description: Movimientos filtrados y totales
    """
    try:
        movements = StockMovementService(get_api_client()).get_all()
    except ApiError as err:
        current_app.logger.error(f"Error cargando movimientos: {err!r}")
        return error_response(err, 'Error al cargar los movimientos')

    return api_response(data=_history_payload(movements))


@pages.route('/movements/mine', methods=['GET'])
@login_required
def my_movements():
    """
    Mis movimientos
    ---
    tags:
      - Movements
    responses:
      200:
        description: Movimientos registrados por el usuario actual
    """
    try:
        movements = StockMovementService(get_api_client()).get_my_movements()
    except ApiError as err:
        current_app.logger.error(f"Error cargando mis movimientos: {err!r}")
        return error_response(err, 'Error al cargar los movimientos')

    return api_response(data=_history_payload(movements))


@pages.route('/movements/stats', methods=['GET'])
@login_required
def movements_stats():
    """
    Estadísticas de movimientos
    ---
    tags:
      - Movements
    responses:
      200:
        description: Estadísticas calculadas por la API
    """
    try:
        stats = StockMovementService(get_api_client()).get_stats()
    except ApiError as err:
        current_app.logger.error(f"Error cargando estadísticas de movimientos: {err!r}")
        return error_response(err, 'Error al cargar las estadísticas')

    return api_response(data={'stats': stats})


@pages.route('/movements/new', methods=['GET'])
@login_required
def movement_form():
    """
    Formulario de movimiento
    ---
    tags:
      - Movements
    summary: Estado inicial del formulario de entrada/salida
    parameters:
      - name: type
        in: query
        type: string
        enum: [IN, OUT]
        default: IN
      - name: itemId
        in: query
        type: integer
      - name: q
        in: query
        type: string
        description: Búsqueda de productos por nombre o SKU
    responses:
      200:
        description: Tipo, productos seleccionables y producto seleccionado
    """
    movement_type = request.args.get('type', MovementType.IN.value).upper()
    if movement_type not in (MovementType.IN.value, MovementType.OUT.value):
        movement_type = MovementType.IN.value
    item_id = request.args.get('itemId', type=int)
    term = get_search_term()

    items = _load_items()
    selected = ItemService.find(items, item_id) if item_id else None

    return api_response(data={
        'type': movement_type,
        'item_id': item_id,
        'items': items_schema.dump(ItemService.filter_items(items, term)),
        'selected_item': ItemSchema().dump(selected) if selected else None,
        'search': term
    })


@pages.route('/movements/new', methods=['POST'])
@login_required
def create_movement():
    """
    Registrar movimiento
    ---
    tags:
      - Movements
    summary: Registra una entrada o salida de stock
    description: |
      Una salida no puede superar el stock disponible del producto; en ese
      caso no se envía nada a la API.
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - itemId
            - quantity
          properties:
            itemId:
              type: integer
            type:
              type: string
              enum: [IN, OUT]
            quantity:
              type: integer
              minimum: 1
            reason:
              type: string
    responses:
      302:
        description: Movimiento registrado, redirección al detalle del producto
      400:
        description: Datos inválidos o stock insuficiente
    """
    try:
        data = StockMovementCreateSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    selected = ItemService.find(_load_items(), data['item_id'])

    try:
        StockMovementService.check_availability(selected, data['type'], data['quantity'])
    except ValueError as e:
        return api_response(message=str(e), status_code=400)

    try:
        StockMovementService(get_api_client()).create(data)
    except ApiError as err:
        current_app.logger.error(f"Error registrando movimiento: {err!r}")
        return error_response(err, 'Error al registrar el movimiento')

    return redirect(url_for('pages.item_detail', item_id=data['item_id']))
