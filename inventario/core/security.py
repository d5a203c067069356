"""
Seguridad - Sesión de la petición y protección de rutas
"""
from functools import wraps
from flask import g, redirect, url_for


def get_auth_session():
    """Sesión de autenticación de la petición en curso"""
    return g.auth


def get_current_user():
    """Usuario de la sesión actual (o None)"""
    return get_auth_session().user


def login_required(fn):
    """
    Decorador de rutas protegidas.
    Si la sesión no está autenticada redirige a la pantalla de login.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not get_auth_session().is_authenticated:
            return redirect(url_for('pages.login'))
        return fn(*args, **kwargs)
    return wrapper
