"""
Modelo User - Usuario autenticado y respuesta de login/registro
"""


class User:
    """Usuario tal como lo devuelve la API"""

    def __init__(self, id, email, display_name=None, is_email_verified=False,
                 created_at=None, updated_at=None):
        self.id = id
        self.email = email
        self.display_name = display_name
        self.is_email_verified = is_email_verified
        self.created_at = created_at
        self.updated_at = updated_at

    def __repr__(self):
        return f'<User {self.email}>'

    def __eq__(self, other):
        return isinstance(other, User) and (self.id, self.email) == (other.id, other.email)

    def __hash__(self):
        return hash((self.id, self.email))


class AuthResponse:
    """Respuesta de POST /auth/login y /auth/register"""

    def __init__(self, user, access_token):
        self.user = user
        self.access_token = access_token

    def __repr__(self):
        return f'<AuthResponse {self.user!r}>'
