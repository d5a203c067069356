"""
Sesión - Estado de autenticación y su copia persistida
"""
import logging

from marshmallow import ValidationError

from inventario.schemas.user import UserSchema

logger = logging.getLogger(__name__)

TOKEN_KEY = 'token'
USER_KEY = 'user'


class SessionStorage:
    """
    Copia persistida del token y del usuario serializado.
    `backend` es cualquier mapping mutable: la `session` de Flask
    (cookie firmada del navegador) o un dict en los tests.
    """

    def __init__(self, backend):
        self.backend = backend

    def save_auth(self, auth_response):
        """Guarda token y usuario"""
        self.backend[TOKEN_KEY] = auth_response.access_token
        self.backend[USER_KEY] = UserSchema().dumps(auth_response.user)

    def save_user(self, user):
        self.backend[USER_KEY] = UserSchema().dumps(user)

    def clear_auth(self):
        """Elimina token y usuario"""
        self.backend.pop(TOKEN_KEY, None)
        self.backend.pop(USER_KEY, None)

    def get_token(self):
        return self.backend.get(TOKEN_KEY) or None

    def has_token(self):
        return self.get_token() is not None

    def get_stored_user(self):
        """Usuario guardado, o None si no hay ninguno o está corrupto"""
        raw = self.backend.get(USER_KEY)
        if not raw:
            return None

        try:
            return UserSchema().loads(raw)
        except (ValidationError, ValueError) as exc:
            logger.warning('Usuario guardado ilegible, se ignora: %s', exc)
            return None


class AuthSession:
    """
    Estado de autenticación de la pestaña/navegador actual.
    Se construye por petición y se inyecta donde hace falta.
    """

    def __init__(self, storage):
        self.storage = storage
        self.user = None
        self.token = None
        self._authenticated = False

    def __repr__(self):
        return f'<AuthSession {self.user!r} authenticated={self._authenticated}>'

    @property
    def is_authenticated(self):
        return self._authenticated

    def set_auth(self, user, token):
        """Guarda usuario y token en memoria y marca la sesión como autenticada"""
        self.user = user
        self.token = token
        self._authenticated = True

    def logout(self):
        """Borra la copia persistida y vuelve al estado no autenticado"""
        self.storage.clear_auth()
        self.user = None
        self.token = None
        self._authenticated = False

    def init_auth(self):
        """
        Restaura la sesión desde la copia persistida.
        Solo si están tanto el token como el usuario; sin llamadas de red.
        """
        token = self.storage.get_token()
        user = self.storage.get_stored_user()
        if token and user:
            self.set_auth(user, token)
        return self._authenticated
