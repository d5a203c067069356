"""
Páginas Categories - Listado, búsqueda y CRUD de categorías
"""
from flask import current_app
from marshmallow import ValidationError

from . import pages
from inventario.core.errors import ApiError
from inventario.core.security import login_required
from inventario.core.utils import (
    api_response, error_response, get_api_client, get_form_data, get_search_term, validation_response
)
from inventario.schemas.category import CategorySchema, CategoryCreateSchema, CategoryUpdateSchema
from inventario.services.category_service import CategoryService

# Schemas instances
category_schema = CategorySchema()
categories_schema = CategorySchema(many=True)


def _list_payload(categories, term):
    filtered = CategoryService.filter_categories(categories, term)
    return {
        'categories': categories_schema.dump(filtered),
        'count': len(filtered),
        'total': len(categories),
        'search': term
    }


@pages.route('/categories', methods=['GET'])
@login_required
def list_categories():
    """
    Lista de categorías
    ---
    tags:
      - Categories
    summary: Categorías filtradas por nombre o descripción
    parameters:
      - name: q
        in: query
        type: string
        description: Término de búsqueda (sin distinguir mayúsculas)
    responses:
      200:
        description: Categorías, número de coincidencias y total
    """
    term = get_search_term()

    try:
        categories = CategoryService(get_api_client()).get_all()
    except ApiError as err:
        current_app.logger.error(f"Error cargando categorías: {err!r}")
        return error_response(err, 'Error al cargar las categorías')

    return api_response(data=_list_payload(categories, term))


@pages.route('/categories', methods=['POST'])
@login_required
def create_category():
    """
    Crear categoría
    ---
    tags:
      - Categories
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
              example: Electrónica
            description:
              type: string
    responses:
      201:
        description: Categoría creada, con la lista recargada
      400:
        description: Datos inválidos
    """
    try:
        data = CategoryCreateSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    service = CategoryService(get_api_client())

    try:
        category = service.create(data)
        categories = service.get_all()
    except ApiError as err:
        current_app.logger.error(f"Error guardando categoría: {err!r}")
        return error_response(err, 'Error al guardar la categoría')

    payload = _list_payload(categories, '')
    payload['category'] = category_schema.dump(category)

    return api_response(data=payload, message='Categoría creada', status_code=201)


@pages.route('/categories/<int:category_id>', methods=['GET'])
@login_required
def get_category(category_id):
    """
    Detalle de una categoría
    ---
    tags:
      - Categories
    parameters:
      - name: category_id
        in: path
        type: integer
        required: true
    responses:
      200:
        description: Categoría
      404:
        description: Categoría no encontrada
    """
    try:
        category = CategoryService(get_api_client()).get_one(category_id)
    except ApiError as err:
        current_app.logger.error(f"Error cargando categoría {category_id}: {err!r}")
        return error_response(err, 'Error al cargar la categoría')

    return api_response(data={'category': category_schema.dump(category)})


@pages.route('/categories/<int:category_id>', methods=['PATCH'])
@login_required
def update_category(category_id):
    """
    Modificar categoría
    ---
    tags:
      - Categories
    parameters:
      - name: category_id
        in: path
        type: integer
        required: true
      - in: body
        name: body
        schema:
          type: object
          properties:
            name:
              type: string
            description:
              type: string
    responses:
      200:
        description: Categoría actualizada, con la lista recargada
      400:
        description: Datos inválidos
    """
    try:
        data = CategoryUpdateSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    service = CategoryService(get_api_client())

    try:
        category = service.update(category_id, data)
        categories = service.get_all()
    except ApiError as err:
        current_app.logger.error(f"Error guardando categoría {category_id}: {err!r}")
        return error_response(err, 'Error al guardar la categoría')

    payload = _list_payload(categories, '')
    payload['category'] = category_schema.dump(category)

    return api_response(data=payload, message='Categoría actualizada')


@pages.route('/categories/<int:category_id>', methods=['DELETE'])
@login_required
def delete_category(category_id):
    """
    Eliminar categoría
    ---
    tags:
      - Categories
    description: |
      Puede afectar a los productos asociados; la confirmación la pide la interfaz.
    parameters:
      - name: category_id
        in: path
        type: integer
        required: true
    responses:
      200:
        description: Categoría eliminada
      404:
        description: Categoría no encontrada
    """
    try:
        CategoryService(get_api_client()).delete(category_id)
    except ApiError as err:
        current_app.logger.error(f"Error eliminando categoría {category_id}: {err!r}")
        return error_response(err, 'Error al eliminar la categoría')

    return api_response(data={'id': category_id}, message='Categoría eliminada')
