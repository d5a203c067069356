import pytest
import requests

from inventario.core.api_client import ApiClient
from inventario.core.errors import (
    ApiValidationError, NetworkError, NotFoundError, UnknownApiError, extract_message
)
from inventario.core.session import AuthSession, SessionStorage
from inventario.schemas.item import ItemSchema


def test_attaches_bearer_token_from_session(api_client, fake_api):
    auth = AuthSession(SessionStorage({}))
    auth.set_auth(user=object(), token='tok-abc')
    api_client.auth = auth
    fake_api.add('GET', '/categories', [])

    assert api_client.get('/categories') == []
    assert fake_api.calls[0].authorization == 'Bearer tok-abc'


def test_no_authorization_header_without_token(api_client, fake_api):
    api_client.auth = AuthSession(SessionStorage({}))
    fake_api.add('GET', '/items', [])

    api_client.get('/items')

    assert fake_api.calls[0].authorization is None


def test_base_url_and_path_are_joined(fake_api):
    http = requests.Session()
    http.mount('http://api.test', fake_api)
    client = ApiClient('http://api.test/', http=http)
    fake_api.add('GET', '/items/low-stock', [])

    client.get('items/low-stock')

    assert fake_api.calls[0].path == '/items/low-stock'


def test_empty_response_returns_none(api_client, fake_api):
    fake_api.add('DELETE', '/categories/3', None, status=204)

    assert api_client.delete('/categories/3') is None


def test_sends_json_body(api_client, fake_api):
    fake_api.add('POST', '/categories', {'id': 1, 'name': 'Ropa'}, status=201)

    api_client.post('/categories', json={'name': 'Ropa'})

    assert fake_api.calls[0].json == {'name': 'Ropa'}


def test_not_found_maps_to_not_found_error(api_client, fake_api):
    fake_api.add('GET', '/items/99', {'message': 'Item 99 no existe', 'statusCode': 404}, status=404)

    with pytest.raises(NotFoundError) as exc_info:
        api_client.get('/items/99')

    assert exc_info.value.kind == 'not_found'
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == 'Item 99 no existe'


def test_client_error_carries_server_message(api_client, fake_api):
    fake_api.add(
        'POST', '/categories',
        {'message': ['name must be a string', 'name should not be empty'], 'statusCode': 400},
        status=400
    )

    with pytest.raises(ApiValidationError) as exc_info:
        api_client.post('/categories', json={})

    assert exc_info.value.message == 'name must be a string, name should not be empty'
    assert exc_info.value.http_status == 400


def test_unauthorized_is_a_validation_error(api_client, fake_api):
    fake_api.add('POST', '/auth/login', {'message': 'Credenciales inválidas'}, status=401)

    with pytest.raises(ApiValidationError) as exc_info:
        api_client.post('/auth/login', json={})

    assert exc_info.value.status_code == 401


def test_server_error_is_unknown(api_client, fake_api):
    fake_api.add('GET', '/items', b'<html>boom</html>', status=500)

    with pytest.raises(UnknownApiError) as exc_info:
        api_client.get('/items')

    assert exc_info.value.message is None
    assert exc_info.value.user_message('Error genérico') == 'Error genérico'
    assert exc_info.value.http_status == 502


def test_invalid_json_on_success_is_unknown(api_client, fake_api):
    fake_api.add('GET', '/items', b'not json')

    with pytest.raises(UnknownApiError):
        api_client.get('/items')


def test_body_that_does_not_fit_schema_is_unknown(api_client, fake_api):
    fake_api.add('GET', '/items', {'data': []})

    with pytest.raises(UnknownApiError) as exc_info:
        api_client.load(ItemSchema(many=True), api_client.get('/items'))

    assert exc_info.value.message is None
    assert exc_info.value.http_status == 502


def test_transport_failure_is_network_error_without_retry(api_client, fake_api):
    fake_api.add('GET', '/items', requests.ConnectionError('connection refused'))

    with pytest.raises(NetworkError) as exc_info:
        api_client.get('/items')

    assert exc_info.value.message is None
    assert exc_info.value.http_status == 503
    assert len(fake_api.calls) == 1


def test_timeout_is_network_error(api_client, fake_api):
    fake_api.add('GET', '/items', requests.Timeout('read timed out'))

    with pytest.raises(NetworkError):
        api_client.get('/items')


def test_extract_message_variants():
    assert extract_message({'message': 'uno'}) == 'uno'
    assert extract_message({'error': 'Bad Request'}) == 'Bad Request'
    assert extract_message({'statusCode': 500}) is None
    assert extract_message(None) is None
    assert extract_message(['no', 'dict']) is None
