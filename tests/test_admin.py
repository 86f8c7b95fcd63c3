def test_stats_counts(client, db):
    db.users.insert_many([
        {"email": "1@x.com", "role": "Buyer"},
        {"email": "2@x.com", "role": "Buyer"},
        {"email": "3@x.com", "role": "Seller"},
        {"email": "4@x.com", "role": "Admin"},
    ])
    db.products.insert_many([{"name": "Mocha"}, {"name": "Latte"}, {"name": "Cortado"}])
    db.reviews.insert_one({"coffeeId": "c1"})

    resp = client.get("/admin/stats")
    assert resp.status_code == 200
    assert resp.json() == {"totalBuyers": 2, "totalSellers": 1, "totalProducts": 3, "totalReviews": 1}


def test_stats_are_live(client, db):
    assert client.get("/admin/stats").json()["totalProducts"] == 0
    client.post("/products", json={"name": "Mocha"})
    assert client.get("/admin/stats").json()["totalProducts"] == 1
