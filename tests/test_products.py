from bson import ObjectId


def seed(db):
    db.products.insert_many([
        {"name": "Mocha Blend", "company": "Bean Co", "sellerEmail": "s@x.com"},
        {"name": "Espresso", "company": "MOCHA house", "sellerEmail": "s@x.com"},
        {"name": "Latte", "company": "Milky", "sellerEmail": "t@x.com"},
    ])


def test_create_and_fetch_product(client, db):
    resp = client.post("/products", json={"name": "Mocha", "company": "Bean Co", "price": 4.5})
    assert resp.status_code == 201
    pid = resp.json()["insertedId"]
    got = client.get(f"/products/{pid}")
    assert got.status_code == 200
    assert got.json()["price"] == 4.5


def test_search_matches_name_or_company(client, db):
    seed(db)
    names = {p["name"] for p in client.get("/products", params={"search": "mocha"}).json()}
    assert names == {"Mocha Blend", "Espresso"}
    assert len(client.get("/products").json()) == 3


def test_search_is_literal(client, db):
    db.products.insert_many([{"name": "Flat White (L)"}, {"name": "Flat White L"}])
    found = client.get("/products", params={"search": "(L)"}).json()
    assert [p["name"] for p in found] == ["Flat White (L)"]


def test_missing_product(client):
    resp = client.get(f"/products/{ObjectId()}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}
    assert client.get("/products/xyz").status_code == 400


def test_update_and_delete_product(client, db):
    pid = db.products.insert_one({"name": "Latte", "price": 3}).inserted_id
    assert client.put(f"/products/{pid}", json={"price": 5}).json()["modifiedCount"] == 1
    assert db.products.find_one({"_id": pid})["price"] == 5
    assert client.delete(f"/products/{pid}").json() == {"acknowledged": True, "deletedCount": 1}
    assert db.products.count_documents({}) == 0


def test_product_fields_are_not_type_checked(client, db):
    resp = client.post("/products", json={"name": 42, "company": None, "tags": {"roast": "dark"}})
    assert resp.status_code == 201
    stored = db.products.find_one({"_id": ObjectId(resp.json()["insertedId"])})
    assert stored["name"] == 42
    assert stored["tags"] == {"roast": "dark"}
