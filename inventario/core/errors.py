"""
Errores de la API remota - Variantes etiquetadas
"""


class ApiError(Exception):
    """
    Error base de la frontera HTTP.
    `message` es el mensaje devuelto por el servidor (o None).
    """
    kind = 'unknown'
    default_status = 502

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.kind)
        self.message = message
        self.status_code = status_code

    def user_message(self, fallback):
        """Mensaje del servidor si existe, si no el genérico de la página"""
        return self.message or fallback

    @property
    def http_status(self):
        """Código HTTP con el que la página responde a este error"""
        return self.status_code or self.default_status

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.status_code}: {self.message}>'


class NetworkError(ApiError):
    """Fallo de transporte: conexión rechazada, DNS, timeout"""
    kind = 'network'
    default_status = 503

    @property
    def http_status(self):
        return self.default_status


class ApiValidationError(ApiError):
    """El servidor rechazó la petición (4xx con mensaje)"""
    kind = 'validation'
    default_status = 400


class NotFoundError(ApiError):
    """Recurso inexistente (404)"""
    kind = 'not_found'
    default_status = 404


class UnknownApiError(ApiError):
    """Cualquier otro fallo (5xx, cuerpo ilegible...)"""
    kind = 'unknown'

    @property
    def http_status(self):
        return self.default_status


def extract_message(body):
    """
    Extrae el mensaje de error de un cuerpo JSON.
    Acepta {"message": "..."}, {"message": ["...", "..."]} o {"error": "..."}.
    """
    if not isinstance(body, dict):
        return None

    message = body.get('message')
    if isinstance(message, (list, tuple)):
        message = ', '.join(str(m) for m in message if m)
    if message:
        return str(message)

    error = body.get('error')
    return str(error) if error else None


def error_for_status(status_code, body=None):
    """Construye la variante adecuada a partir de una respuesta HTTP fallida"""
    message = extract_message(body)

    if status_code == 404:
        return NotFoundError(message, status_code)
    if 400 <= status_code < 500:
        return ApiValidationError(message, status_code)
    return UnknownApiError(message, status_code)
