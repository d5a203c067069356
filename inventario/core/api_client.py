"""
Cliente HTTP - Envío único de peticiones a la API REST con token Bearer
"""
import logging

import requests
from marshmallow import ValidationError

from inventario.core.errors import NetworkError, UnknownApiError, error_for_status

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Envoltorio de `requests` configurado con la URL base de la API.
    Adjunta el token de la sesión actual (si existe) en cada petición.
    Un solo intento: sin reintentos, sin backoff, sin caché.
    """

    def __init__(self, base_url, auth=None, timeout=30, http=None):
        self.base_url = base_url.rstrip('/')
        self.auth = auth
        self.timeout = timeout
        self.http = http or requests.Session()

    def _headers(self):
        headers = {'Accept': 'application/json'}
        token = getattr(self.auth, 'token', None)
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def url_for(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def send(self, method, path, json=None, params=None):
        """
        Envía la petición y devuelve el cuerpo JSON decodificado.
        Lanza una subclase de ApiError si la petición falla.
        """
        url = self.url_for(path)
        logger.debug('%s %s', method, url)

        try:
            resp = self.http.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning('Fallo de red en %s %s: %s', method, path, exc)
            raise NetworkError(None) from exc

        if resp.status_code >= 400:
            error = error_for_status(resp.status_code, self._decode(resp))
            logger.warning('%s %s -> %s (%s)', method, path, resp.status_code, error.message)
            raise error

        if resp.status_code == 204 or not resp.content:
            return None

        body = self._decode(resp)
        if body is None:
            raise UnknownApiError('Respuesta no válida de la API', resp.status_code)
        return body

    @staticmethod
    def _decode(resp):
        try:
            return resp.json()
        except ValueError:
            return None

    def get(self, path, params=None):
        return self.send('GET', path, params=params)

    def post(self, path, json=None):
        return self.send('POST', path, json=json)

    def patch(self, path, json=None):
        return self.send('PATCH', path, json=json)

    def delete(self, path):
        return self.send('DELETE', path)

    def load(self, schema, body):
        """
        Lee un cuerpo de la API con un schema de lectura.
        Un cuerpo que no encaja es un fallo de la API, no del usuario.
        """
        try:
            return schema.load(body)
        except ValidationError as err:
            logger.warning('Cuerpo inesperado de la API para %s: %s', schema.__class__.__name__, err.messages)
            raise UnknownApiError(None) from err
