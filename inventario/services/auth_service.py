"""
Service Auth - Login, registro y perfil
"""
from inventario.schemas.user import AuthResponseSchema, UserSchema


class AuthService:
    """Servicio de autenticación contra /auth y /users"""

    def __init__(self, client, storage=None):
        self.client = client
        self.storage = storage

    def login(self, email, password):
        data = self.client.post('/auth/login', json={'email': email, 'password': password})
        return self.client.load(AuthResponseSchema(), data)

    def register(self, email, password, display_name=None):
        payload = {'email': email, 'password': password}
        if display_name:
            payload['displayName'] = display_name
        data = self.client.post('/auth/register', json=payload)
        return self.client.load(AuthResponseSchema(), data)

    def get_profile(self):
        """GET /users/me devuelve {"user": {...}}"""
        data = self.client.get('/users/me')
        user = data.get('user') if isinstance(data, dict) else None
        return self.client.load(UserSchema(), user)

    def save_auth(self, auth_response):
        self.storage.save_auth(auth_response)

    def clear_auth(self):
        self.storage.clear_auth()

    def is_authenticated(self):
        return self.storage.has_token()

    def get_stored_user(self):
        return self.storage.get_stored_user()
