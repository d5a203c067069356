"""
Core - Cliente HTTP, sesión, seguridad y utilidades
"""
from .api_client import ApiClient
from .errors import ApiError, NetworkError, ApiValidationError, NotFoundError, UnknownApiError
from .session import AuthSession, SessionStorage
from .security import login_required, get_auth_session, get_current_user

__all__ = [
    'ApiClient',
    'ApiError', 'NetworkError', 'ApiValidationError', 'NotFoundError', 'UnknownApiError',
    'AuthSession', 'SessionStorage',
    'login_required', 'get_auth_session', 'get_current_user'
]
