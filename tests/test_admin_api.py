"""Admin dashboard API tests."""


def test_dashboard_requires_token(client):
    response = client.get('/api/admin/dashboard')

    assert response.status_code == 401


def test_dashboard_denied_for_regular_user(client, user_headers):
    response = client.get('/api/admin/dashboard', headers=user_headers)

    assert response.status_code == 403
    assert response.json() == {'message': 'Access denied'}


def test_dashboard_for_admin_on_fresh_database(client, admin_headers):
    response = client.get('/api/admin/dashboard', headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data['stats'] == {
        'userCount': 1,
        'trainCount': 5,
        'ticketCount': 0,
        'cancelledCount': 0,
        'confirmedRevenue': 0,
    }
    assert data['recentBookings'] == []


def test_dashboard_counts_bookings(client, admin_headers, user_headers, book_ticket):
    ticket_ids = [book_ticket(user_headers).json()['ticketId'] for _ in range(3)]
    client.put(f'/api/tickets/{ticket_ids[0]}/cancel', headers=user_headers)

    data = client.get('/api/admin/dashboard', headers=admin_headers).json()

    stats = data['stats']
    assert stats['userCount'] == 2
    assert stats['ticketCount'] == 3
    assert stats['cancelledCount'] == 1
    assert stats['confirmedRevenue'] == 8800
    assert all(value >= 0 for value in stats.values())

    recent = data['recentBookings']
    assert [booking['id'] for booking in recent] == list(reversed(ticket_ids))
    assert recent[0]['userName'] == 'Jane'
    assert recent[0]['trainName'] == 'Rajdhani Express'


def test_recent_bookings_are_capped_at_ten(client, admin_headers, user_headers, book_ticket):
    for _ in range(12):
        book_ticket(user_headers, passengers=[{'name': 'Solo', 'age': 40, 'gender': 'male'}])

    data = client.get('/api/admin/dashboard', headers=admin_headers).json()

    assert data['stats']['ticketCount'] == 12
    assert len(data['recentBookings']) == 10
