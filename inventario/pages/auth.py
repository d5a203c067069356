"""
Páginas Auth - Login, registro y cierre de sesión
"""
from flask import current_app, redirect, session, url_for
from marshmallow import ValidationError

from . import pages
from inventario.core.errors import ApiError
from inventario.core.security import get_auth_session
from inventario.core.utils import api_response, error_response, get_api_client, get_form_data, validation_response
from inventario.schemas.user import LoginSchema, RegisterSchema, UserSchema
from inventario.services.auth_service import AuthService


def _auth_service():
    return AuthService(get_api_client(), get_auth_session().storage)


def _start_session(service, auth_response):
    """Persiste la respuesta en la cookie y marca la sesión como autenticada"""
    session.permanent = True
    service.save_auth(auth_response)
    get_auth_session().set_auth(auth_response.user, auth_response.access_token)


def _screen_state():
    auth = get_auth_session()
    user = UserSchema().dump(auth.user) if auth.user else None
    return {'authenticated': auth.is_authenticated, 'user': user}


@pages.route('/login', methods=['GET'])
def login():
    """
    Pantalla de login
    ---
    tags:
      - Auth
    summary: Estado de la pantalla de login
    responses:
      200:
        description: Indica si ya hay una sesión activa
    """
    return api_response(data=_screen_state())


@pages.route('/login', methods=['POST'])
def login_submit():
    """
    Iniciar sesión
    ---
    tags:
      - Auth
    summary: Login contra la API remota
    description: |
      Valida el formulario, llama a POST /auth/login, guarda token y usuario
      en la cookie de sesión y redirige al dashboard.
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - email
            - password
          properties:
            email:
              type: string
              example: admin@example.com
            password:
              type: string
    responses:
      302:
        description: Login correcto, redirección a /dashboard
      400:
        description: Datos inválidos
      401:
        description: Credenciales rechazadas por la API
    """
    try:
        data = LoginSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    service = _auth_service()

    try:
        auth_response = service.login(data['email'], data['password'])
    except ApiError as err:
        current_app.logger.error(f"Error al iniciar sesión: {err!r}")
        return error_response(err, 'Error al iniciar sesión')

    _start_session(service, auth_response)
    return redirect(url_for('pages.dashboard'))


@pages.route('/register', methods=['GET'])
def register():
    """
    Pantalla de registro
    ---
    tags:
      - Auth
    responses:
      200:
        description: Indica si ya hay una sesión activa
    """
    return api_response(data=_screen_state())


@pages.route('/register', methods=['POST'])
def register_submit():
    """
    Crear cuenta
    ---
    tags:
      - Auth
    summary: Registro contra la API remota
    description: |
      Comprueba que las contraseñas coinciden y tienen al menos 5 caracteres,
      llama a POST /auth/register y abre la sesión.
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - email
            - password
            - confirmPassword
          properties:
            email:
              type: string
            password:
              type: string
            confirmPassword:
              type: string
            displayName:
              type: string
    responses:
      302:
        description: Registro correcto, redirección a /dashboard
      400:
        description: Datos inválidos o rechazados por la API
    """
    try:
        data = RegisterSchema().load(get_form_data())
    except ValidationError as err:
        return validation_response(err)

    service = _auth_service()

    try:
        auth_response = service.register(
            data['email'],
            data['password'],
            display_name=data.get('display_name')
        )
    except ApiError as err:
        current_app.logger.error(f"Error al registrarse: {err!r}")
        return error_response(err, 'Error al registrarse')

    _start_session(service, auth_response)
    return redirect(url_for('pages.dashboard'))


@pages.route('/logout', methods=['POST'])
def logout():
    """
    Cerrar sesión
    ---
    tags:
      - Auth
    responses:
      302:
        description: Sesión borrada, redirección a /login
    """
    get_auth_session().logout()
    return redirect(url_for('pages.login'))
