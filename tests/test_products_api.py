import pytest


@pytest.fixture
async def products(admin_client):
    rows = [
        {"name": "Seed Mix", "price": 8.5, "category": "Food"},
        {"name": "Cage XL", "price": 120, "category": "Cages"},
        {"name": "Cuttlebone", "price": 3},
        {"name": "Millet Spray", "price": 4.25, "category": "Food"},
    ]
    created = []
    for row in rows:
        resp = await admin_client.post("/api/products", json=row)
        assert resp.status_code == 201, resp.text
        created.append(resp.json()["data"])
    return created


async def test_default_listing_ordered_by_name(client, products):
    body = (await client.get("/api/products")).json()
    assert [p["name"] for p in body["data"]] == ["Cage XL", "Cuttlebone", "Millet Spray", "Seed Mix"]


async def test_category_filter_skips_uncategorised(client, products):
    body = (await client.get("/api/products", params={"categories": "Food Cages"})).json()
    assert body["meta"]["total"] == 3
    assert all(p["category"] in {"Food", "Cages"} for p in body["data"])


async def test_sort_by_price_with_open_upper_bound(client, products):
    body = (await client.get("/api/products", params={"price": "4 *", "sortby": "price"})).json()
    assert [p["price"] for p in body["data"]] == [4.25, 8.5, 120.0]


async def test_pagination_over_many_products(admin_client):
    for i in range(23):
        await admin_client.post("/api/products", json={"name": f"Toy {i:02d}", "price": i})
    page3 = (await admin_client.get("/api/products", params={"page": "3"})).json()
    assert page3["meta"] == {"total": 23, "page": 3, "limit": 10, "pages": 3}
    assert [p["name"] for p in page3["data"]] == ["Toy 20", "Toy 21", "Toy 22"]


async def test_invalid_body_is_rejected(admin_client):
    resp = await admin_client.post("/api/products", json={"name": "Perch", "price": -1})
    assert resp.status_code == 422


async def test_update_and_delete(admin_client, products):
    product_id = products[2]["id"]
    resp = await admin_client.put(f"/api/products/{product_id}", json={"category": "Health"})
    assert resp.json()["data"]["category"] == "Health"
    assert resp.json()["data"]["name"] == "Cuttlebone"

    assert (await admin_client.delete(f"/api/products/{product_id}")).status_code == 204
    assert (await admin_client.get(f"/api/products/{product_id}")).status_code == 404


async def test_missing_product_is_404(client):
    resp = await client.get("/api/products/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


async def test_create_rejects_infinite_price(admin_client):
    resp = await admin_client.post(
        "/api/products",
        content=b'{"name": "Perch", "price": 1e999}',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 422
    assert (await admin_client.get("/api/products")).json()["meta"]["total"] == 0


async def test_update_rejects_nan_price(admin_client, products):
    product_id = products[0]["id"]
    resp = await admin_client.put(
        f"/api/products/{product_id}",
        content=b'{"price": NaN}',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 422
