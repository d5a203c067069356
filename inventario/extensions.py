"""
Extensiones Flask - Inicialización centralizada
"""
from http.cookiejar import DefaultCookiePolicy

import requests
from flask_cors import CORS

# CORS
cors = CORS()


def create_http_session():
    """
    Sesión HTTP compartida (pool de conexiones) hacia la API remota.
    Es común a todos los usuarios: no guarda ni reenvía cookies de la API.
    """
    http = requests.Session()
    http.headers.update({'Accept': 'application/json'})
    http.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    return http
