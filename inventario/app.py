"""
Aplicación Flask - Factory Pattern
"""
import os
from flask import Flask, g, redirect, session, url_for
from flasgger import Swagger
from marshmallow import ValidationError

from inventario.config import config
from inventario.core.api_client import ApiClient
from inventario.core.errors import ApiError
from inventario.core.session import AuthSession, SessionStorage
from inventario.core.utils import api_response, validation_response
from inventario.extensions import cors, create_http_session

HTTP_EXTENSION = 'inventario_http'


# Configuración Swagger
SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/apispec.json",
            "rule_filter": lambda rule: True,
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/"
}

SWAGGER_TEMPLATE = {
    "info": {
        "title": "Inventario Web",
        "description": "Páginas del cliente de inventario: autenticación, categorías, productos y movimientos de stock.",
        "version": "1.0.0"
    },
    "tags": [
        {"name": "Auth", "description": "Login, registro y cierre de sesión"},
        {"name": "Dashboard", "description": "Resumen y perfil"},
        {"name": "Categories", "description": "Gestión de categorías"},
        {"name": "Items", "description": "Inventario y detalle de productos"},
        {"name": "Movements", "description": "Entradas y salidas de stock"}
    ]
}


def create_app(config_name=None):
    """
    Factory para crear la aplicación Flask.
    """
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Inicializar las extensiones
    register_extensions(app)

    # Inicializar Swagger
    Swagger(app, config=SWAGGER_CONFIG, template=SWAGGER_TEMPLATE)

    # Registrar los blueprints
    register_blueprints(app)

    # Registrar los manejadores de errores
    register_error_handlers(app)

    # Registrar los hooks
    register_hooks(app)

    return app


def register_extensions(app):
    """
    Inicializa las extensiones Flask.
    """
    app.extensions[HTTP_EXTENSION] = create_http_session()

    # CORS con los orígenes configurados; la sesión viaja en cookie
    cors.init_app(app, resources={
        r"/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "X-Requested-With"],
            "supports_credentials": True
        }
    })


def register_blueprints(app):
    """
    Registra las páginas.
    """
    from inventario.pages import pages
    app.register_blueprint(pages)

    # Ruta de salud
    @app.route('/health')
    def health():
        return {'status': 'healthy', 'version': '1.0.0', 'api': app.config['API_BASE_URL']}, 200


def register_error_handlers(app):
    """
    Registra los manejadores de errores globales.
    """
    @app.errorhandler(ApiError)
    def api_error(error):
        app.logger.error(f"Error de la API no controlado: {error!r}")
        return api_response(message=error.user_message('Error inesperado de la API'), status_code=error.http_status)

    @app.errorhandler(ValidationError)
    def validation_error(error):
        return validation_response(error)

    @app.errorhandler(404)
    def not_found(error):
        # Cualquier ruta desconocida vuelve al dashboard
        return redirect(url_for('pages.dashboard'))

    @app.errorhandler(405)
    def method_not_allowed(error):
        return api_response(message='Método no permitido para esta ruta', status_code=405)

    @app.errorhandler(500)
    def internal_error(error):
        return api_response(message='Se produjo un error interno', status_code=500)


def register_hooks(app):
    """
    Registra los hooks de petición.
    """
    @app.before_request
    def load_auth_session():
        # Restaurar la sesión persistida en la cookie, sin llamadas de red
        auth = AuthSession(SessionStorage(session))
        auth.init_auth()
        g.auth = auth
        g.api = ApiClient(
            app.config['API_BASE_URL'],
            auth=auth,
            timeout=app.config['API_TIMEOUT'],
            http=app.extensions[HTTP_EXTENSION]
        )

    @app.after_request
    def after_request(response):
        # Cabeceras de seguridad
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response


# Punto de entrada para desarrollo
if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000)
