"""HTTP tests for /api/products."""

WIDGET = {"name": "Widget", "price": 9.99, "stock": 5}


async def test_list_starts_empty(client, auth_headers):
    res = await client.get("/api/products", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == []


async def test_widget_lifecycle(client, auth_headers):
    res = await client.post("/api/products", json=WIDGET, headers=auth_headers)
    assert res.status_code == 201
    assert res.json() == {"id": 1, "name": "Widget", "price": 9.99, "stock": 5}

    res = await client.put(
        "/api/products/1",
        json={"name": "Widget", "price": 8.99, "stock": 3},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "Widget", "price": 8.99, "stock": 3}

    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == [{"id": 1, "name": "Widget", "price": 8.99, "stock": 3}]

    res = await client.delete("/api/products/1", headers=auth_headers)
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == []


async def test_create_ignores_client_id(client, auth_headers):
    res = await client.post("/api/products", json={**WIDGET, "id": 42}, headers=auth_headers)
    assert res.status_code == 201
    assert res.json()["id"] == 1


async def test_create_assigns_distinct_ids(client, auth_headers):
    ids = []
    for name in ("A", "B", "C"):
        res = await client.post("/api/products", json={**WIDGET, "name": name}, headers=auth_headers)
        ids.append(res.json()["id"])
    assert len(set(ids)) == 3


async def test_create_rejects_invalid_payload_without_writing(client, auth_headers):
    bad = {"name": " ", "price": -1, "stock": -2}
    res = await client.post("/api/products", json=bad, headers=auth_headers)

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [v["field"] for v in error["details"]["violations"]] == ["name", "price", "stock"]

    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == []


async def test_create_reports_missing_fields(client, auth_headers):
    res = await client.post("/api/products", json={}, headers=auth_headers)

    assert res.status_code == 400
    violations = res.json()["error"]["details"]["violations"]
    assert {"field": "price", "message": "must not be null"} in violations
    assert {"field": "stock", "message": "must not be null"} in violations


async def test_create_rejects_wrong_types(client, auth_headers):
    res = await client.post(
        "/api/products", json={"name": "Widget", "price": 1, "stock": "lots"}, headers=auth_headers
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]["violations"][0]["field"] == "stock"


async def test_create_rejects_malformed_json(client, auth_headers):
    res = await client.post(
        "/api/products",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert res.status_code == 400


async def test_update_rejects_invalid_payload_and_keeps_row(client, auth_headers):
    await client.post("/api/products", json=WIDGET, headers=auth_headers)

    res = await client.put(
        "/api/products/1", json={"name": "Widget", "price": 1, "stock": -1}, headers=auth_headers
    )
    assert res.status_code == 400

    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == [{"id": 1, **WIDGET}]


async def test_update_missing_product_is_not_found(client, auth_headers):
    res = await client.put("/api/products/99", json=WIDGET, headers=auth_headers)

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["details"] == {"entity": "Product", "id": 99}

    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == []


async def test_delete_twice_is_idempotent(client, auth_headers):
    await client.post("/api/products", json=WIDGET, headers=auth_headers)

    first = await client.delete("/api/products/1", headers=auth_headers)
    second = await client.delete("/api/products/1", headers=auth_headers)

    assert first.status_code == 204
    assert second.status_code == 204
    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == []


async def test_delete_unknown_product_succeeds(client, auth_headers):
    res = await client.delete("/api/products/12345", headers=auth_headers)
    assert res.status_code == 204


async def test_non_numeric_id_is_a_client_error(client, auth_headers):
    res = await client.put("/api/products/abc", json=WIDGET, headers=auth_headers)
    assert res.status_code == 400


async def test_create_rejects_price_that_would_be_rounded(client, auth_headers):
    res = await client.post(
        "/api/products", json={**WIDGET, "price": 9.999}, headers=auth_headers
    )

    assert res.status_code == 400
    assert res.json()["error"]["details"]["violations"] == [
        {"field": "price", "message": "must have at most 2 decimal places"}
    ]
    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == []


async def test_stored_price_matches_response(client, auth_headers):
    created = await client.post(
        "/api/products", json={**WIDGET, "price": 12.5}, headers=auth_headers
    )
    listed = await client.get("/api/products", headers=auth_headers)

    assert created.json()["price"] == 12.5
    assert listed.json()[0]["price"] == 12.5


async def test_create_rejects_stock_out_of_range(client, auth_headers):
    res = await client.post(
        "/api/products", json={**WIDGET, "stock": 10**20}, headers=auth_headers
    )

    assert res.status_code == 400
    assert res.json()["error"]["details"]["violations"][0]["field"] == "stock"


async def test_update_rejects_stock_out_of_range(client, auth_headers):
    await client.post("/api/products", json=WIDGET, headers=auth_headers)

    res = await client.put(
        "/api/products/1", json={**WIDGET, "stock": 10**20}, headers=auth_headers
    )

    assert res.status_code == 400
    res = await client.get("/api/products", headers=auth_headers)
    assert res.json() == [{"id": 1, **WIDGET}]


async def test_update_with_out_of_range_id_is_a_client_error(client, auth_headers):
    res = await client.put(
        "/api/products/100000000000000000000", json=WIDGET, headers=auth_headers
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_delete_with_out_of_range_id_is_a_client_error(client, auth_headers):
    res = await client.delete("/api/products/100000000000000000000", headers=auth_headers)

    assert res.status_code == 400
    assert res.json()["error"]["details"]["violations"][0]["field"] == "path.product_id"
