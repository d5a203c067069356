"""
Utilidades comunes de las páginas
"""
from flask import g, request


def get_api_client():
    """Cliente de la API ligado a la sesión de la petición"""
    return g.api


def get_form_data():
    """Cuerpo del formulario: JSON o form-urlencoded"""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data


def get_search_term():
    """Término de búsqueda (?q=)"""
    return request.args.get('q', '', type=str).strip()


def get_type_filter():
    """Filtro de tipo de movimiento (?type=ALL|IN|OUT)"""
    value = request.args.get('type', 'ALL', type=str).upper()
    return value if value in ('ALL', 'IN', 'OUT') else 'ALL'


def matches_term(term, *values):
    """
    Coincidencia por subcadena sin distinguir mayúsculas.
    Un término vacío coincide con todo; los valores None se ignoran.
    """
    if not term:
        return True
    needle = term.lower()
    return any(needle in value.lower() for value in values if value)


def first_error_message(messages):
    """Primer mensaje de un diccionario de errores de marshmallow"""
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            found = first_error_message(value)
            if found:
                return found
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = first_error_message(value)
            if found:
                return found
    return None


def api_response(data=None, message=None, status_code=200, errors=None):
    """
    Formatea una respuesta estandarizada de página.
    """
    response = {
        'success': status_code < 400,
        'status_code': status_code
    }

    if message:
        response['message'] = message

    if data is not None:
        response['data'] = data

    if errors:
        response['errors'] = errors

    return response, status_code


def error_response(error, fallback):
    """Respuesta para un ApiError: mensaje del servidor o el genérico"""
    return api_response(message=error.user_message(fallback), status_code=error.http_status)


def validation_response(err):
    """Respuesta 400 para un ValidationError de marshmallow"""
    return api_response(
        message=first_error_message(err.messages) or 'Datos inválidos',
        status_code=400,
        errors=err.messages
    )
