from fastapi import status


def _body(
    customer_name='Ann',
    guest_count=4,
    time='2024-01-01T10:00',
) -> dict:
    return {
        'customerName': customer_name,
        'guestCount': guest_count,
        'time': time,
    }


class TestListing:

    def test_tables_in_seed_order(self, client):
        response = client.get('/tables')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {'id': 1, 'seats': 4, 'available': True},
            {'id': 2, 'seats': 4, 'available': True},
            {'id': 3, 'seats': 6, 'available': True},
            {'id': 4, 'seats': 6, 'available': True},
            {'id': 5, 'seats': 8, 'available': True},
        ]

    def test_reservations_empty(self, client):
        response = client.get('/reservations')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_reservation_fields_are_camel_case(self, client):
        client.post('/reserve', json=_body())

        assert client.get('/reservations').json() == [
            {
                'id': 1,
                'tableId': 1,
                'customerName': 'Ann',
                'guestCount': 4,
                'time': '2024-01-01T10:00',
                'status': 'confirmed',
            },
        ]

    def test_healthcheck(self, client):
        client.post('/reserve', json=_body())

        assert client.get('/healthcheck').json() == {
            'status': 'ok',
            'tables': 5,
            'reservations': 1,
        }


class TestReserve:

    def test_success(self, client):
        response = client.post('/reserve', json=_body())

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'success': 'Table 1 reserved for Ann (4 guests)',
        }
        tables = client.get('/tables').json()
        assert tables[0]['available'] is False

    def test_too_many_guests(self, client):
        response = client.post('/reserve', json=_body(guest_count=10))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'Maximum 8 guests per reservation',
        }
        assert client.get('/reservations').json() == []

    def test_no_available_table(self, client):
        for _ in range(5):
            client.post('/reserve', json=_body(guest_count=2))

        response = client.post('/reserve', json=_body(guest_count=2))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'No available tables for 2 guests',
        }

    def test_missing_field(self, client):
        body = _body()
        del body['time']

        response = client.post('/reserve', json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'Name, guest count, and time are required',
        }

    def test_falsy_fields(self, client):
        for body in (
            _body(customer_name=''),
            _body(guest_count=0),
            _body(time=''),
        ):
            response = client.post('/reserve', json=body)

            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json() == {
                'error': 'Name, guest count, and time are required',
            }

    def test_missing_body(self, client):
        response = client.post('/reserve')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'Name, guest count, and time are required',
        }

    def test_non_integer_guest_count(self, client):
        response = client.post('/reserve', json=_body(guest_count='many'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.json()

    def test_name_of_any_type_is_accepted(self, client):
        response = client.post(
            '/reserve',
            json=_body(customer_name=123, guest_count=2, time='18:00'),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'success': 'Table 1 reserved for 123 (2 guests)',
        }
        reservation = client.get('/reservations').json()[0]
        assert reservation['customerName'] == '123'

    def test_body_not_an_object(self, client):
        for body in ([], 'Ann', 4):
            response = client.post('/reserve', json=body)

            assert response.status_code == status.HTTP_400_BAD_REQUEST
            assert response.json() == {
                'error': 'Name, guest count, and time are required',
            }


class TestUpdate:

    def test_success(self, client):
        client.post('/reserve', json=_body())

        response = client.put(
            '/update/1',
            json=_body(customer_name='Anna', guest_count=3, time='19:00'),
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'success': 'Reservation updated successfully',
        }
        reservation = client.get('/reservations').json()[0]
        assert reservation['customerName'] == 'Anna'
        assert reservation['guestCount'] == 3
        assert reservation['time'] == '19:00'
        assert reservation['tableId'] == 1

    def test_not_found(self, client):
        client.post('/reserve', json=_body())
        before = client.get('/reservations').json()

        response = client.put('/update/2', json=_body(customer_name='Bob'))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Reservation not found'}
        assert client.get('/reservations').json() == before

    def test_non_numeric_id_is_not_found(self, client):
        response = client.put('/update/abc', json=_body())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Reservation not found'}

    def test_numeric_prefix_id(self, client):
        client.post('/reserve', json=_body())

        response = client.put('/update/1abc', json=_body(customer_name='Bob'))

        assert response.status_code == status.HTTP_200_OK

    def test_validation_before_lookup(self, client):
        response = client.put('/update/1', json=_body(guest_count=9))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'Maximum 8 guests per reservation',
        }

    def test_moves_to_fitting_table(self, client):
        client.post('/reserve', json=_body(guest_count=4))

        client.put('/update/1', json=_body(guest_count=8))

        assert client.get('/reservations').json()[0]['tableId'] == 5
        availability = [t['available'] for t in client.get('/tables').json()]
        assert availability == [True, True, True, True, False]


class TestCancel:

    def test_success(self, client):
        client.post('/reserve', json=_body())

        response = client.delete('/cancel/1')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'success': 'Reservation cancelled successfully',
        }
        assert client.get('/reservations').json() == []
        assert client.get('/tables').json()[0]['available'] is True

    def test_not_found(self, client):
        response = client.delete('/cancel/1')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Reservation not found'}

    def test_non_numeric_id_is_not_found(self, client):
        response = client.delete('/cancel/abc')

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestErrors:

    def test_unknown_route(self, client):
        response = client.get('/unknown')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Not Found'}

    def test_method_not_allowed(self, client):
        response = client.get('/reserve')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert 'error' in response.json()

    def test_request_id_header(self, client):
        response = client.get('/tables', headers={'X-Request-ID': 'abc'})

        assert response.headers['X-Request-ID'] == 'abc'
