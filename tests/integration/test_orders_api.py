"""Integration tests for Orders and Menu API endpoints."""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, update

from core.data.models import OrderModel

ORDER_PAYLOAD = {
    "customer_name": "Sam Taylor",
    "phone": "0400111222",
    "address": "7 Mozzarella Road",
    "items": [
        {"pizza": "Margherita", "size": "Large", "crust": "Thin"},
        {
            "pizza": "Make Your Own",
            "size": "Small",
            "toppings": ["Tomato Sauce", "Mushroom", "Feta"],
            "dietary_requirements": ["Vegetarian"],
            "allergies": ["Nuts"],
            "instructions": "Extra crispy",
        },
    ],
}


def _place(client: TestClient, payload=None) -> dict:
    response = client.post("/api/v1/orders", json=payload or ORDER_PAYLOAD)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_order_success(test_client: TestClient):
    """POST /orders returns the full graph with generated ids."""
    data = _place(test_client)

    assert len(data["id"]) == 12
    assert data["status"] == "Order Placed"
    assert data["customer_name"] == "Sam Taylor"
    assert len(data["items"]) == 2

    margherita, custom = data["items"]
    assert margherita["crust"] == "Thin"
    assert [t["topping"] for t in margherita["toppings"]] == [
        "Tomato Sauce", "Mozzarella", "Tomatoes", "Basil",
    ]
    assert not any(t["is_extra"] for t in margherita["toppings"])

    assert custom["crust"] == "Regular"
    assert all(t["is_extra"] for t in custom["toppings"])
    assert custom["dietary_requirements"][0]["dietary_requirement"] == "Vegetarian"
    assert custom["allergies"][0]["allergy"] == "Nuts"
    assert custom["instructions"] == "Extra crispy"


def test_get_order_by_id(test_client: TestClient):
    created = _place(test_client)

    response = test_client.get(f"/api/v1/orders/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_order_not_found(test_client: TestClient):
    response = test_client.get("/api/v1/orders/AAAAAAAAAAAA")

    assert response.status_code == 404
    assert "AAAAAAAAAAAA" in response.json()["detail"]


def test_get_order_with_malformed_id_is_not_found(test_client: TestClient):
    response = test_client.get("/api/v1/orders/not%20an%20id!")

    assert response.status_code == 404


def test_get_order_status(test_client: TestClient):
    created = _place(test_client)

    response = test_client.get(f"/api/v1/orders/{created['id']}/status")

    assert response.status_code == 200
    data = response.json()
    assert data == {
        "order_id": created["id"],
        "status": "Order Placed",
        "step": 0,
        "statuses": ["Order Placed", "Preparing", "Cooking", "Quality Check", "Ready"],
        "is_ready": False,
    }


def test_update_order_status_one_step(test_client: TestClient):
    created = _place(test_client)

    response = test_client.patch(
        f"/api/v1/orders/{created['id']}/status", json={"status": "Preparing"}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Preparing"

    status_page = test_client.get(f"/api/v1/orders/{created['id']}/status").json()
    assert status_page["step"] == 1


def test_update_order_status_skip_is_conflict(test_client: TestClient):
    created = _place(test_client)

    response = test_client.patch(
        f"/api/v1/orders/{created['id']}/status", json={"status": "Ready"}
    )

    assert response.status_code == 409
    assert test_client.get(f"/api/v1/orders/{created['id']}").json()["status"] == "Order Placed"


def test_update_order_status_unknown_value_is_rejected(test_client: TestClient):
    created = _place(test_client)

    response = test_client.patch(
        f"/api/v1/orders/{created['id']}/status", json={"status": "Delivered"}
    )

    assert response.status_code == 422


def test_update_order_status_unknown_order(test_client: TestClient):
    response = test_client.patch(
        "/api/v1/orders/AAAAAAAAAAAA/status", json={"status": "Preparing"}
    )

    assert response.status_code == 404


def test_list_orders_with_status_filter(test_client: TestClient):
    first = _place(test_client)
    second = _place(test_client)
    test_client.patch(f"/api/v1/orders/{first['id']}/status", json={"status": "Preparing"})

    everything = test_client.get("/api/v1/orders").json()
    preparing = test_client.get("/api/v1/orders", params={"status": "Preparing"}).json()

    assert {o["id"] for o in everything} == {first["id"], second["id"]}
    assert [o["id"] for o in preparing] == [first["id"]]


def test_create_order_validation_errors(test_client: TestClient):
    cases = [
        {**ORDER_PAYLOAD, "items": []},
        {**ORDER_PAYLOAD, "customer_name": "A"},
        {**ORDER_PAYLOAD, "items": [{"pizza": "Calzone", "size": "Large"}]},
        {**ORDER_PAYLOAD, "items": [{"pizza": "Margherita", "size": "Huge"}]},
        {**ORDER_PAYLOAD, "items": [{"pizza": "Margherita", "size": "Large", "toppings": ["Gold Leaf"]}]},
        {**ORDER_PAYLOAD, "items": [{"pizza": "Margherita", "size": "Large", "allergies": ["Cats"]}]},
    ]

    for payload in cases:
        response = test_client.post("/api/v1/orders", json=payload)
        assert response.status_code == 422, payload

    assert test_client.get("/api/v1/orders").json() == []


def test_storage_failure_is_opaque(broken_client: TestClient):
    response = broken_client.post("/api/v1/orders", json=ORDER_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_menu_endpoint(test_client: TestClient):
    response = test_client.get("/api/v1/menu")

    assert response.status_code == 200
    data = response.json()
    assert len(data["pizza_types"]) == 15
    assert data["sizes"] == ["Small", "Medium", "Large", "X-Large", "Family"]
    assert data["default_toppings"]["Hawaiian"] == ["Tomato Sauce", "Mozzarella", "Ham", "Pineapple"]
    assert "Sesame" in data["allergies"]
    assert data["statuses"][-1] == "Ready"


def test_health_check(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_orders_with_topping_filter(test_client: TestClient):
    with_feta = _place(test_client)
    plain = _place(
        test_client,
        {**ORDER_PAYLOAD, "items": [{"pizza": "Hawaiian", "size": "Medium"}]},
    )

    feta = test_client.get("/api/v1/orders", params={"topping": "Feta"}).json()
    pineapple = test_client.get("/api/v1/orders", params={"topping": "Pineapple"}).json()
    preparing_feta = test_client.get(
        "/api/v1/orders", params={"topping": "Feta", "status": "Preparing"}
    ).json()

    assert [o["id"] for o in feta] == [with_feta["id"]]
    assert [o["id"] for o in pineapple] == [plain["id"]]
    assert preparing_feta == []


def test_corrupt_stored_status_is_opaque(test_client: TestClient, database_url: str):
    created = _place(test_client)
    engine = create_engine(database_url.replace("+aiosqlite", ""))
    with engine.begin() as conn:
        conn.execute(
            update(OrderModel).where(OrderModel.id == created["id"]).values(status="Burnt")
        )
    engine.dispose()

    response = test_client.get(f"/api/v1/orders/{created['id']}")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
