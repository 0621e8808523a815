from conftest import make_product
from sqlalchemy import text

from sustainhub.core.config import settings

DELIVERY = {
    "deliveryAddress": "Av. Julius Nyerere 123",
    "deliveryCity": "Maputo",
    "deliveryPhone": "+258840000000",
    "paymentMethod": "mpesa",
}


def place(client, headers, items, **extra):
    return client.post("/api/orders/", json={**DELIVERY, **extra, "items": items}, headers=headers)


def test_create_order_computes_total_from_catalog(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers, price=250)

    res = place(client, user_headers, [{"productId": product_id, "quantity": 2}])
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["success"] is True
    order_id = body["orderId"]

    order = client.get(f"/api/orders/{order_id}", headers=user_headers).json()
    assert order["totalAmount"] == 500
    assert order["status"] == "pending"
    assert order["deliveryCity"] == "Maputo"
    assert len(order["items"]) == 1
    item = order["items"][0]
    assert item["productId"] == product_id
    assert item["productName"] == "Sementes Orgânicas de Milho"
    assert item["quantity"] == 2
    assert item["price"] == 250


def test_client_prices_are_ignored(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers, price=180, name="Fertilizante Orgânico")

    res = place(
        client,
        user_headers,
        [{"productId": product_id, "quantity": 3, "price": 1, "productName": "Cheap"}],
    )
    order = client.get(f"/api/orders/{res.json()['orderId']}", headers=user_headers).json()
    assert order["totalAmount"] == 540
    assert order["items"][0]["price"] == 180
    assert order["items"][0]["productName"] == "Fertilizante Orgânico"


def test_anonymous_order_is_rejected(client, admin_headers):
    product_id = make_product(client, admin_headers)

    res = place(client, {}, [{"productId": product_id, "quantity": 1}])
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


def test_unknown_product_creates_nothing(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)

    res = place(
        client,
        user_headers,
        [{"productId": product_id, "quantity": 1}, {"productId": 9999, "quantity": 1}],
    )
    assert res.status_code == 404
    assert client.get("/api/orders/mine", headers=user_headers).json() == []


def test_invalid_quantity_is_a_validation_error(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)

    res = place(client, user_headers, [{"productId": product_id, "quantity": 0}])
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_missing_delivery_fields_are_rejected(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)

    res = client.post(
        "/api/orders/",
        json={"deliveryCity": "Maputo", "items": [{"productId": product_id, "quantity": 1}]},
        headers=user_headers,
    )
    assert res.status_code == 422


def test_empty_items_checks_out_server_cart(client, admin_headers, user_headers):
    seeds = make_product(client, admin_headers, price=250)
    honey = make_product(client, admin_headers, name="Mel Silvestre", price=350)
    client.post("/api/cart/", json={"productId": seeds, "quantity": 2}, headers=user_headers)
    client.post("/api/cart/", json={"productId": honey}, headers=user_headers)

    res = place(client, user_headers, [])
    assert res.status_code == 200, res.text

    order = client.get(f"/api/orders/{res.json()['orderId']}", headers=user_headers).json()
    assert order["totalAmount"] == 2 * 250 + 350
    assert [i["productId"] for i in order["items"]] == [seeds, honey]
    assert client.get("/api/cart/", headers=user_headers).json() == []


def test_order_clears_cart(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    client.post("/api/cart/", json={"productId": product_id, "quantity": 1}, headers=user_headers)

    res = place(client, user_headers, [{"productId": product_id, "quantity": 1}])
    assert res.status_code == 200
    assert client.get("/api/cart/", headers=user_headers).json() == []


def test_empty_cart_and_no_items_is_rejected(client, user_headers):
    res = place(client, user_headers, [])
    assert res.status_code == 422
    assert res.json()["error"]["message"] == "Cart is empty"


def test_each_submitted_line_becomes_an_item(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers, price=250)

    res = place(
        client,
        user_headers,
        [{"productId": product_id, "quantity": 1}, {"productId": product_id, "quantity": 2}],
    )
    order = client.get(f"/api/orders/{res.json()['orderId']}", headers=user_headers).json()
    assert [i["quantity"] for i in order["items"]] == [1, 2]
    assert order["totalAmount"] == 750


def test_failed_item_insert_rolls_back_order(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    client.post("/api/cart/", json={"productId": product_id, "quantity": 2}, headers=user_headers)

    async def block_order_items():
        async with client.app.state.db.engine.begin() as conn:
            await conn.execute(text(
                "CREATE TRIGGER block_order_items BEFORE INSERT ON order_items "
                "BEGIN SELECT RAISE(ABORT, 'order items unavailable'); END"
            ))

    client.portal.call(block_order_items)

    res = place(client, user_headers, [])
    assert res.status_code == 500
    assert res.json()["error"]["message"] == "Failed to create order"
    assert client.get("/api/orders/mine", headers=user_headers).json() == []

    cart = client.get("/api/cart/", headers=user_headers).json()
    assert [(c["productId"], c["quantity"]) for c in cart] == [(product_id, 2)]


def test_deleted_product_leaves_the_cart(client, admin_headers, user_headers):
    kept = make_product(client, admin_headers, price=250)
    dropped = make_product(client, admin_headers, name="Mel Silvestre", price=350)
    client.post("/api/cart/", json={"productId": kept}, headers=user_headers)
    client.post("/api/cart/", json={"productId": dropped}, headers=user_headers)

    assert client.delete(f"/api/admin/products/{dropped}", headers=admin_headers).status_code == 200
    cart = client.get("/api/cart/", headers=user_headers).json()
    assert [c["productId"] for c in cart] == [kept]

    res = place(client, user_headers, [])
    assert res.status_code == 200, res.text
    order = client.get(f"/api/orders/{res.json()['orderId']}", headers=user_headers).json()
    assert order["totalAmount"] == 250


def test_order_lines_survive_product_changes(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers, price=250)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 2}]).json()["orderId"]

    client.patch(f"/api/admin/products/{product_id}", json={"price": 999}, headers=admin_headers)
    assert client.delete(f"/api/admin/products/{product_id}", headers=admin_headers).status_code == 200

    order = client.get(f"/api/orders/{order_id}", headers=user_headers).json()
    assert order["totalAmount"] == 500
    assert order["items"][0]["price"] == 250
    assert order["items"][0]["productName"] == "Sementes Orgânicas de Milho"


def test_my_orders_newest_first(client, admin_headers, user_headers, other_headers):
    product_id = make_product(client, admin_headers)
    first = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]
    second = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]
    place(client, other_headers, [{"productId": product_id, "quantity": 1}])

    mine = client.get("/api/orders/mine", headers=user_headers).json()
    assert [o["id"] for o in mine] == [second, first]


def test_other_users_order_is_forbidden(client, admin_headers, user_headers, other_headers):
    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]

    res = client.get(f"/api/orders/{order_id}", headers=other_headers)
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"

    assert client.get(f"/api/orders/{order_id}", headers=admin_headers).status_code == 200


def test_missing_order_is_not_found(client, user_headers):
    res = client.get("/api/orders/4242", headers=user_headers)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_all_orders_is_admin_only(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    place(client, user_headers, [{"productId": product_id, "quantity": 1}])

    assert client.get("/api/orders/", headers=user_headers).status_code == 403
    orders = client.get("/api/orders/", headers=admin_headers).json()
    assert len(orders) == 1


def test_admin_updates_status(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]

    res = client.patch(f"/api/orders/{order_id}/status", json={"status": "shipped"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get(f"/api/orders/{order_id}", headers=user_headers).json()["status"] == "shipped"


def test_user_cannot_update_status(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]

    res = client.patch(f"/api/orders/{order_id}/status", json={"status": "delivered"}, headers=user_headers)
    assert res.status_code == 403


def test_unknown_status_is_rejected(client, admin_headers, user_headers):
    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]

    res = client.patch(f"/api/orders/{order_id}/status", json={"status": "lost"}, headers=admin_headers)
    assert res.status_code == 422


def test_status_update_on_missing_order_fails(client, admin_headers):
    res = client.patch("/api/orders/777/status", json={"status": "processing"}, headers=admin_headers)
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_strict_transitions(client, admin_headers, user_headers, monkeypatch):
    monkeypatch.setattr(settings, "ORDER_STRICT_TRANSITIONS", True)
    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]
    url = f"/api/orders/{order_id}/status"

    assert client.patch(url, json={"status": "delivered"}, headers=admin_headers).status_code == 422
    assert client.patch(url, json={"status": "processing"}, headers=admin_headers).status_code == 200
    assert client.patch(url, json={"status": "processing"}, headers=admin_headers).status_code == 200
    assert client.patch(url, json={"status": "shipped"}, headers=admin_headers).status_code == 200
    assert client.patch(url, json={"status": "delivered"}, headers=admin_headers).status_code == 200
    assert client.patch(url, json={"status": "cancelled"}, headers=admin_headers).status_code == 422


def test_status_change_emails_owner(client, admin_headers, user_headers, monkeypatch):
    sent = []
    monkeypatch.setattr(settings, "SMTP_SERVER", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_USER", "noreply@example.com")
    monkeypatch.setattr("app.routes.orders.send_email", lambda to, subject, body: sent.append((to, subject)))

    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]
    client.patch(f"/api/orders/{order_id}/status", json={"status": "shipped"}, headers=admin_headers)

    assert sent == [("user-1@example.com", f"Pedido #{order_id}: Enviado")]


def test_failed_email_keeps_status(client, admin_headers, user_headers, monkeypatch):
    def broken_send(to, subject, body):
        raise OSError("smtp down")

    monkeypatch.setattr(settings, "SMTP_SERVER", "smtp.example.com")
    monkeypatch.setattr(settings, "SMTP_USER", "noreply@example.com")
    monkeypatch.setattr("app.routes.orders.send_email", broken_send)

    product_id = make_product(client, admin_headers)
    order_id = place(client, user_headers, [{"productId": product_id, "quantity": 1}]).json()["orderId"]
    res = client.patch(f"/api/orders/{order_id}/status", json={"status": "delivered"}, headers=admin_headers)

    assert res.status_code == 200
    assert client.get(f"/api/orders/{order_id}", headers=user_headers).json()["status"] == "delivered"
