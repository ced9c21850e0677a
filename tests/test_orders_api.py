"""Customer order endpoints."""

from datetime import datetime, timezone

import pytest
from sqlmodel import func, select

from billbook.db.session import transaction
from billbook.models.order import Order, OrderItem
from conftest import auth_header, login, signup


def _place(client, token, items=None):
    if items is None:
        items = [{"category": "shirt", "color": "blue", "quantity": 2}]
    return client.post("/api/orders", json={"items": items}, headers=auth_header(token))


def _row_counts(session):
    return (
        session.exec(select(func.count(Order.billno))).one(),
        session.exec(select(func.count(OrderItem.id))).one(),
    )


class TestCreateOrderEndpoint:
    def test_signup_login_and_order(self, client):
        signup(client, "alice", "555-1", "pw")
        token = login(client, "555-1", "pw")

        response = _place(client, token)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] is False
        assert data["billno"] >= 1
        assert "createdAt" in data
        assert len(data["items"]) == 1
        item = data["items"][0]
        assert item["category"] == "shirt"
        assert item["color"] == "blue"
        assert item["quantity"] == 2
        assert item["orderBillno"] == data["billno"]

    def test_created_at_carries_utc_offset(self, client, user_token):
        created_at = _place(client, user_token).json()["createdAt"]
        assert created_at.endswith(("Z", "+00:00"))

        listed = client.get("/api/orders", headers=auth_header(user_token)).json()
        assert listed[0]["createdAt"] == created_at

    def test_items_keep_insertion_order(self, client, user_token):
        items = [
            {"category": "c", "color": "x", "quantity": 1},
            {"category": "a", "color": "y", "quantity": 2},
            {"category": "b", "color": "z", "quantity": 3},
        ]
        data = _place(client, user_token, items).json()
        assert [item["category"] for item in data["items"]] == ["c", "a", "b"]

    def test_empty_items_bad_request(self, client, user_token, session):
        response = _place(client, user_token, [])
        assert response.status_code == 400
        assert response.json() == {"message": 'Request must include a non-empty "items" array'}
        assert _row_counts(session) == (0, 0)

    def test_missing_items_bad_request(self, client, user_token, session):
        response = client.post("/api/orders", json={}, headers=auth_header(user_token))
        assert response.status_code == 400
        assert _row_counts(session) == (0, 0)

    def test_invalid_item_rolls_back(self, client, user_token, session):
        response = _place(
            client,
            user_token,
            [
                {"category": "shirt", "color": "blue", "quantity": 2},
                {"category": "pants", "color": "black", "quantity": 0},
            ],
        )
        assert response.status_code == 400
        assert _row_counts(session) == (0, 0)

    @pytest.mark.parametrize("quantity", [True, 10**30])
    def test_non_integer_or_oversized_quantity_bad_request(self, client, user_token, session, quantity):
        response = _place(client, user_token, [{"category": "shirt", "color": "blue", "quantity": quantity}])
        assert response.status_code == 400
        assert _row_counts(session) == (0, 0)

    def test_requires_authentication(self, client, session):
        response = client.post(
            "/api/orders", json={"items": [{"category": "shirt", "color": "blue", "quantity": 1}]}
        )
        assert response.status_code == 401
        assert _row_counts(session) == (0, 0)


class TestListOrdersEndpoint:
    def _backdate(self, session, billno, when):
        order = session.get(Order, billno)
        with transaction(session):
            order.created_at = when
            session.add(order)

    def test_lists_own_orders_newest_first(self, client, user_token, session):
        first = _place(client, user_token).json()["billno"]
        second = _place(client, user_token).json()["billno"]
        self._backdate(session, first, datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc))
        self._backdate(session, second, datetime(2024, 5, 2, 10, 0, tzinfo=timezone.utc))

        signup(client, "bob", "555-2", "pw")
        bob = login(client, "555-2", "pw")
        _place(client, bob)

        response = client.get("/api/orders", headers=auth_header(user_token))

        assert response.status_code == 200
        assert [order["billno"] for order in response.json()] == [second, first]
        assert all(len(order["items"]) == 1 for order in response.json())

    def test_date_range_is_inclusive_of_whole_days(self, client, user_token, session):
        before = _place(client, user_token).json()["billno"]
        start = _place(client, user_token).json()["billno"]
        end = _place(client, user_token).json()["billno"]
        after = _place(client, user_token).json()["billno"]
        self._backdate(session, before, datetime(2024, 5, 31, 23, 59, 59, 999000, tzinfo=timezone.utc))
        self._backdate(session, start, datetime(2024, 6, 1, 0, 0, 0, tzinfo=timezone.utc))
        self._backdate(session, end, datetime(2024, 6, 3, 23, 59, 59, 999000, tzinfo=timezone.utc))
        self._backdate(session, after, datetime(2024, 6, 4, 0, 0, 0, tzinfo=timezone.utc))

        response = client.get(
            "/api/orders",
            params={"startDate": "2024-06-01", "endDate": "2024-06-03"},
            headers=auth_header(user_token),
        )

        assert response.status_code == 200
        assert [order["billno"] for order in response.json()] == [end, start]

    def test_invalid_date_bad_request(self, client, user_token):
        response = client.get(
            "/api/orders", params={"startDate": "yesterday"}, headers=auth_header(user_token)
        )
        assert response.status_code == 400

    def test_requires_authentication(self, client):
        assert client.get("/api/orders").status_code == 401
