import pytest
import requests

from conftest import item_payload, movement_payload


@pytest.fixture
def items_api(fake_api):
    fake_api.add('GET', '/items', [
        item_payload(id=1, name='Teclado', sku='TEC-01', current_stock=4),
        item_payload(id=2, name='Ratón', sku='RAT-02', current_stock=0),
    ])
    return fake_api


def test_exit_over_available_stock_is_blocked(logged_client, items_api):
    response = logged_client.post('/movements/new', json={'itemId': 1, 'type': 'OUT', 'quantity': 5})

    assert response.status_code == 400
    assert response.get_json()['message'] == 'No hay suficiente stock. Disponible: 4 unidades'
    assert items_api.called('POST', '/stock-movements') == []


def test_exit_from_empty_item_is_blocked(logged_client, items_api):
    response = logged_client.post('/movements/new', data={'itemId': '2', 'type': 'OUT', 'quantity': '1'})

    assert response.get_json()['message'] == 'No hay suficiente stock. Disponible: 0 unidades'
    assert items_api.called('POST', '/stock-movements') == []


def test_exit_within_stock_is_submitted(logged_client, items_api):
    items_api.add('POST', '/stock-movements', movement_payload(9, 'OUT', 4), status=201)

    response = logged_client.post('/movements/new', json={
        'itemId': 1, 'type': 'OUT', 'quantity': 4, 'reason': '  Venta mostrador ',
    })

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/items/1')
    assert items_api.called('POST', '/stock-movements')[0].json == {
        'itemId': 1, 'type': 'OUT', 'quantity': 4, 'reason': 'Venta mostrador',
    }


def test_entry_is_not_limited_by_stock(logged_client, items_api):
    items_api.add('POST', '/stock-movements', movement_payload(9, 'IN', 100, item_id=2), status=201)

    response = logged_client.post('/movements/new', json={'itemId': 2, 'quantity': 100})

    assert response.status_code == 302
    assert items_api.called('POST', '/stock-movements')[0].json == {'itemId': 2, 'type': 'IN', 'quantity': 100}


@pytest.mark.parametrize('payload, message', [
    ({'type': 'IN', 'quantity': 1}, 'Debe seleccionar un producto'),
    ({'itemId': 1, 'type': 'IN', 'quantity': 0}, 'La cantidad debe ser mayor a 0'),
    ({'itemId': 1, 'type': 'IN', 'quantity': ''}, 'La cantidad debe ser mayor a 0'),
])
def test_invalid_form_is_rejected_before_any_request(logged_client, items_api, payload, message):
    response = logged_client.post('/movements/new', json=payload)

    assert response.status_code == 400
    assert response.get_json()['message'] == message
    assert items_api.calls == []


def test_server_rejection_shows_message(logged_client, items_api):
    items_api.add('POST', '/stock-movements', {'message': 'Stock insuficiente'}, status=400)

    response = logged_client.post('/movements/new', json={'itemId': 1, 'type': 'OUT', 'quantity': 1})

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Stock insuficiente'


def test_network_failure_uses_fallback_message(logged_client, items_api):
    items_api.add('POST', '/stock-movements', requests.ConnectionError('down'))

    response = logged_client.post('/movements/new', json={'itemId': 1, 'type': 'IN', 'quantity': 1})

    assert response.status_code == 503
    assert response.get_json()['message'] == 'Error al registrar el movimiento'


def test_form_state_preselects_item_and_type(logged_client, items_api):
    data = logged_client.get('/movements/new', query_string={'type': 'OUT', 'itemId': 1}).get_json()['data']

    assert data['type'] == 'OUT'
    assert data['selected_item']['name'] == 'Teclado'
    assert len(data['items']) == 2


def test_form_state_defaults_and_search(logged_client, items_api):
    data = logged_client.get('/movements/new', query_string={'type': 'X', 'q': 'rat'}).get_json()['data']

    assert data['type'] == 'IN'
    assert data['selected_item'] is None
    assert [i['name'] for i in data['items']] == ['Ratón']


def test_movement_history_filters_and_stats(logged_client, fake_api):
    fake_api.add('GET', '/stock-movements', [
        movement_payload(1, 'IN', 6, reason='Compra'),
        movement_payload(2, 'OUT', 2, reason='Rotura'),
    ])

    data = logged_client.get('/movements', query_string={'type': 'IN'}).get_json()['data']

    assert [m['id'] for m in data['movements']] == [1]
    assert data['stats']['balance'] == 4


def test_my_movements_and_stats(logged_client, fake_api):
    fake_api.add('GET', '/stock-movements/my-movements', [movement_payload(1, 'IN', 6)])
    fake_api.add('GET', '/stock-movements/stats', {'totalIn': 6})

    assert logged_client.get('/movements/mine').get_json()['data']['count'] == 1
    assert logged_client.get('/movements/stats').get_json()['data']['stats'] == {'totalIn': 6}
