"""
Fixtures pytest - App de test y API remota simulada.
La API REST se sustituye por un adaptador de `requests` que responde con
rutas registradas y guarda cada llamada recibida.
"""
import json
from collections import namedtuple
from http.client import HTTPMessage
from types import SimpleNamespace
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

from inventario.app import create_app, HTTP_EXTENSION
from inventario.core.api_client import ApiClient

API_URL = 'http://api.test'

USER_PAYLOAD = {
    'id': 1,
    'email': 'ana@example.com',
    'displayName': 'Ana',
    'isEmailVerified': True,
    'createdAt': '2024-01-10T09:00:00+00:00',
    'updatedAt': '2024-01-10T09:00:00+00:00',
}

AUTH_PAYLOAD = {'user': USER_PAYLOAD, 'access_token': 'tok-123'}

Call = namedtuple('Call', 'method path json authorization cookie')


class FakeApi(BaseAdapter):
    """Transporte de requests con respuestas registradas por (método, ruta)"""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []

    def add(self, method, path, body=None, status=200, headers=None):
        """`body` puede ser un cuerpo JSON, una excepción o un callable(payload) -> (status, body)"""
        self.routes[(method.upper(), path)] = (status, body, headers)

    def called(self, method, path):
        return [c for c in self.calls if c.method == method and c.path == path]

    def send(self, request, **kwargs):
        path = urlsplit(request.url).path
        payload = json.loads(request.body) if request.body else None
        self.calls.append(Call(
            request.method, path, payload,
            request.headers.get('Authorization'), request.headers.get('Cookie')
        ))

        status, body, headers = self.routes.get(
            (request.method, path),
            (404, {'message': 'Cannot find ' + path, 'statusCode': 404}, None)
        )
        if isinstance(body, Exception):
            raise body
        if callable(body):
            status, body = body(payload)

        return self._build_response(request, status, body, headers)

    @staticmethod
    def _build_response(request, status, body, headers=None):
        response = requests.Response()
        response.status_code = status
        response.url = request.url
        response.request = request
        response.encoding = 'utf-8'
        response._content_consumed = True
        if body is None:
            response._content = b''
        elif isinstance(body, bytes):
            response._content = body
        else:
            response._content = json.dumps(body).encode('utf-8')
            response.headers['Content-Type'] = 'application/json'
        if headers:
            # requests lee Set-Cookie de la respuesta cruda de http.client
            message = HTTPMessage()
            for key, value in headers.items():
                response.headers[key] = value
                message[key] = value
            response.raw = SimpleNamespace(_original_response=SimpleNamespace(msg=message))
        return response

    def close(self):
        pass


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def app(fake_api):
    app = create_app('testing')
    app.extensions[HTTP_EXTENSION].mount(API_URL, fake_api)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def api_client(fake_api):
    http = requests.Session()
    http.mount(API_URL, fake_api)
    return ApiClient(API_URL, http=http)


@pytest.fixture
def logged_client(client, fake_api):
    """Cliente con una sesión abierta a través de /login"""
    fake_api.add('POST', '/auth/login', AUTH_PAYLOAD, status=201)
    response = client.post('/login', json={'email': 'ana@example.com', 'password': 'secreto'})
    assert response.status_code == 302
    fake_api.calls.clear()
    return client


def item_payload(id=1, name='Teclado', current_stock=10, min_stock=2, sku='TEC-01', **extra):
    data = {
        'id': id,
        'name': name,
        'description': None,
        'sku': sku,
        'currentStock': current_stock,
        'minStock': min_stock,
        'price': 25.5,
        'categoryId': None,
        'createdAt': '2024-02-01T10:00:00+00:00',
        'updatedAt': '2024-02-01T10:00:00+00:00',
    }
    data.update(extra)
    return data


def movement_payload(id, type, quantity, item_id=1, reason=None, user=None):
    return {
        'id': id,
        'itemId': item_id,
        'userId': user['id'] if user else None,
        'type': type,
        'quantity': quantity,
        'reason': reason,
        'createdAt': '2024-02-02T10:00:00+00:00',
        'user': user,
    }
