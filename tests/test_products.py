"""Tests for the catalog endpoints."""

import pytest

from tests.conftest import make_product

NEW_PRODUCT = {
    "name": "Denim Jacket",
    "description": "Heavy denim",
    "price": 49.5,
    "size": "L",
    "category": "jackets",
    "images": ["/uploads/jacket-front.jpg", {"url": "https://cdn.example.com/jacket-back.jpg"}],
}


class TestReadProducts:
    def test_list_newest_first(self, client, db_session):
        older = make_product(db_session, "Older")
        newer = make_product(db_session, "Newer")

        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [p["id"] for p in data["products"]] == [newer.id, older.id]

    def test_pagination(self, client, db_session):
        for i in range(3):
            make_product(db_session, f"P{i}")
        response = client.get("/api/products", params={"skip": 1, "limit": 1})
        assert len(response.json()["products"]) == 1
        assert response.json()["total"] == 3

    def test_get_resolves_relative_image_urls(self, client, shirt):
        response = client.get(f"/api/products/{shirt.id}")
        assert response.status_code == 200
        assert response.json()["images"] == [
            {"id": "img-1", "url": "http://media.test/uploads/shirt.jpg"}
        ]

    def test_get_unknown(self, client):
        assert client.get("/api/products/999").status_code == 404


class TestSearchProducts:
    def test_matches_name_or_description_ignoring_case(self, client, db_session):
        by_name = make_product(db_session, "Summer Dress")
        by_description = make_product(db_session, "Tank Top", description="Light SUMMER cotton")
        make_product(db_session, "Wool Coat", description="Winter wear")

        response = client.get("/api/products/search", params={"q": "summer"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [p["id"] for p in data["products"]] == [by_description.id, by_name.id]

    def test_filter_by_category(self, client, db_session):
        make_product(db_session, "Cap", category="hats")
        shirt = make_product(db_session, "Cap Sleeve Shirt", category="shirts")

        response = client.get("/api/products/search", params={"q": "cap", "category": "shirts"})

        assert [p["id"] for p in response.json()["products"]] == [shirt.id]

    def test_wildcards_are_literal(self, client, db_session):
        make_product(db_session, "Plain Tee")
        discounted = make_product(db_session, "Tee 50% off")

        response = client.get("/api/products/search", params={"q": "%"})

        assert [p["id"] for p in response.json()["products"]] == [discounted.id]

    def test_without_terms_returns_everything(self, client, shirt, socks):
        assert client.get("/api/products/search").json()["total"] == 2

    def test_no_match(self, client, shirt):
        response = client.get("/api/products/search", params={"q": "umbrella"})
        assert response.status_code == 200
        assert response.json() == {"products": [], "total": 0}


class TestFeaturedProducts:
    def test_explore_grouped_by_category(self, client, db_session):
        tee = make_product(db_session, "Tee", category="shirts", is_explore=True)
        polo = make_product(db_session, "Polo", category="shirts", is_explore=True)
        scarf = make_product(db_session, "Scarf", category="accessories", is_explore=True)
        make_product(db_session, "Hidden", category="shirts")

        response = client.get("/api/products/explore")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [p["id"] for p in data["categories"]["shirts"]] == [polo.id, tee.id]
        assert [p["id"] for p in data["categories"]["accessories"]] == [scarf.id]
        assert data["categories"]["shirts"][0]["images"][0]["url"] == "http://media.test/uploads/shirt.jpg"

    def test_trending_only_flagged_newest_first(self, client, db_session):
        first = make_product(db_session, "First", is_trending=True)
        make_product(db_session, "Plain")
        second = make_product(db_session, "Second", is_trending=True, offer_strip="20% off")

        response = client.get("/api/products/trending")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["products"]] == [second.id, first.id]
        assert data["products"][0]["offer_strip"] == "20% off"

    def test_trending_limit(self, client, db_session):
        for i in range(3):
            make_product(db_session, f"Hot {i}", is_trending=True)
        response = client.get("/api/products/trending", params={"limit": 2})
        assert response.json()["total"] == 2

    def test_flag_set_by_update_shows_up(self, client, admin_headers, shirt):
        assert client.get("/api/products/explore").json()["count"] == 0
        client.put(f"/api/products/{shirt.id}", json={"is_explore": True}, headers=admin_headers)
        assert client.get("/api/products/explore").json()["categories"] == {
            "shirts": [client.get(f"/api/products/{shirt.id}").json()]
        }


class TestWriteProducts:
    def test_admin_creates_product(self, client, admin_headers):
        response = client.post("/api/products", json=NEW_PRODUCT, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["price"] == 49.5
        assert [image["url"] for image in data["images"]] == [
            "http://media.test/uploads/jacket-front.jpg",
            "https://cdn.example.com/jacket-back.jpg",
        ]
        assert all(image["id"] for image in data["images"])
        assert data["images"][0]["id"] != data["images"][1]["id"]

    def test_non_admin_cannot_create(self, client, user_headers):
        assert client.post("/api/products", json=NEW_PRODUCT, headers=user_headers).status_code == 403
        assert client.post("/api/products", json=NEW_PRODUCT).status_code == 401

    @pytest.mark.parametrize("overrides", [
        {"size": "XXL"},
        {"price": -1},
        {"images": []},
        {"name": ""},
    ])
    def test_invalid_product(self, client, admin_headers, overrides):
        response = client.post(
            "/api/products", json=dict(NEW_PRODUCT, **overrides), headers=admin_headers
        )
        assert response.status_code == 400

    def test_update(self, client, admin_headers, shirt):
        response = client.put(
            f"/api/products/{shirt.id}",
            json={"name": "Linen Shirt II", "is_trending": True},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Linen Shirt II"
        assert response.json()["is_trending"] is True
        assert response.json()["price"] == 10.0

    def test_update_unknown(self, client, admin_headers):
        assert client.put("/api/products/999", json={"price": 1}, headers=admin_headers).status_code == 404

    def test_delete(self, client, admin_headers, shirt):
        assert client.delete(f"/api/products/{shirt.id}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/products/{shirt.id}").status_code == 404

    def test_delete_product_referenced_by_order(self, client, admin_headers, user_headers, address, shirt):
        client.post(
            "/api/orders/add",
            json={
                "products": [{"product": shirt.id, "quantity": 1}],
                "shipping_address": address.id,
                "payment_method": "paypal",
            },
            headers=user_headers,
        )
        response = client.delete(f"/api/products/{shirt.id}", headers=admin_headers)
        assert response.status_code == 400
        assert client.get(f"/api/products/{shirt.id}").status_code == 200


class TestProductImages:
    def test_delete_one_image(self, client, admin_headers, db_session):
        product = make_product(
            db_session,
            images=[{"id": "a", "url": "/a.jpg"}, {"id": "b", "url": "/b.jpg"}],
        )
        response = client.delete(f"/api/products/{product.id}/images/a", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["images"] == [{"id": "b", "url": "http://media.test/b.jpg"}]

    def test_unknown_image(self, client, admin_headers, shirt):
        response = client.delete(f"/api/products/{shirt.id}/images/nope", headers=admin_headers)
        assert response.status_code == 404

    def test_cannot_remove_last_image(self, client, admin_headers, shirt):
        response = client.delete(f"/api/products/{shirt.id}/images/img-1", headers=admin_headers)
        assert response.status_code == 400
