"""
Páginas Dashboard - Resumen y perfil del usuario
"""
from flask import current_app, redirect, url_for

from . import pages
from inventario.core.errors import ApiError
from inventario.core.security import login_required, get_auth_session, get_current_user
from inventario.core.utils import api_response, error_response, get_api_client
from inventario.schemas.item import ItemSchema
from inventario.schemas.user import UserSchema
from inventario.services.auth_service import AuthService
from inventario.services.dashboard_service import DashboardService


@pages.route('/', methods=['GET'])
def index():
    return redirect(url_for('pages.dashboard'))


@pages.route('/dashboard', methods=['GET'])
@login_required
def dashboard():
    """
    Dashboard
    ---
    tags:
      - Dashboard
    summary: Usuario actual y resumen del inventario
    description: |
      Devuelve el usuario de la sesión, los productos con stock bajo y las
      estadísticas de productos y movimientos. Si la API falla al cargar el
      resumen, se devuelve igualmente el usuario con un mensaje de error.
    responses:
      200:
        description: Dashboard
      302:
        description: Sin sesión, redirección a /login
    """
    data = {'user': UserSchema().dump(get_current_user())}

    try:
        overview = DashboardService(get_api_client()).overview()
    except ApiError as err:
        current_app.logger.error(f"Error cargando el resumen: {err!r}")
        return api_response(data=data, message=err.user_message('Error al cargar el resumen'))

    data.update({
        'low_stock': ItemSchema(many=True).dump(overview['low_stock']),
        'low_stock_count': overview['low_stock_count'],
        'items_stats': overview['items_stats'],
        'movements_stats': overview['movements_stats']
    })

    return api_response(data=data)


@pages.route('/profile', methods=['GET'])
@login_required
def profile():
    """
    Perfil del usuario
    ---
    tags:
      - Dashboard
    summary: Refresca el usuario desde GET /users/me
    responses:
      200:
        description: Perfil actualizado
    """
    auth = get_auth_session()

    try:
        user = AuthService(get_api_client(), auth.storage).get_profile()
    except ApiError as err:
        current_app.logger.error(f"Error cargando el perfil: {err!r}")
        return error_response(err, 'Error al cargar el perfil')

    auth.storage.save_user(user)
    auth.set_auth(user, auth.token)

    return api_response(data={'user': UserSchema().dump(user)})
