from __future__ import annotations

import json
from pathlib import Path

import pytest

from shopfront.app import create_app
from shopfront.infrastructure.data_loader import DataLoadError, load_catalog, load_users
from shopfront.shared.config import AppConfig


def _write(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    _write(tmp_path / "brands.json", [{"id": "1", "name": "Oakley"}, {"id": 2, "name": "Ray Ban"}])
    _write(
        tmp_path / "products.json",
        [
            {
                "id": "1",
                "categoryId": "1",
                "name": "Superglasses",
                "description": "The best glasses in the world",
                "price": 150,
                "imageUrls": ["https://example.com/1.jpg"],
            }
        ],
    )
    _write(
        tmp_path / "users.json",
        [
            {
                "gender": "female",
                "email": "alice@example.com",
                "login": {"username": "alice", "password": "secret", "md5": "x"},
                "cart": [],
            },
            {
                "email": "bob@example.com",
                "login": {"username": "bob", "password": "hunter2"},
            },
        ],
    )
    return tmp_path


def test_load_catalog(data_dir: Path) -> None:
    brands, products = load_catalog(data_dir)

    assert [b.id for b in brands] == ["1", "2"]
    assert products[0].category_id == "1"
    assert products[0].attributes == {
        "price": 150,
        "imageUrls": ["https://example.com/1.jpg"],
    }


def test_load_users(data_dir: Path) -> None:
    users = load_users(data_dir)

    assert [u.username for u in users] == ["alice", "bob"]
    assert users[0].email == "alice@example.com"
    assert users[0].check_password("secret")
    assert users[1].cart == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError) as info:
        load_users(tmp_path)

    assert info.value.path == tmp_path / "users.json"


def test_malformed_records_raise(data_dir: Path) -> None:
    _write(data_dir / "brands.json", [{"name": "no id"}])

    with pytest.raises(DataLoadError):
        load_catalog(data_dir)


def test_create_app_loads_data_dir(data_dir: Path) -> None:
    app = create_app(AppConfig(DATA_DIR=data_dir))

    with app.test_client() as client:
        assert client.get("/health").get_json() == {
            "ok": True,
            "brands": 2,
            "products": 1,
            "users": 2,
        }
        login = client.post("/login", json={"username": "alice", "password": "secret"})
        token = login.get_json()["accessToken"]
        added = client.post("/me/cart", query_string={"accessToken": token, "productId": "1"})

    assert added.status_code == 200
    assert added.get_json()["price"] == 150


def test_duplicate_product_in_user_cart_raises(data_dir: Path) -> None:
    product = {"id": "1", "categoryId": "1", "name": "Superglasses"}
    _write(
        data_dir / "users.json",
        [
            {
                "email": "alice@example.com",
                "login": {"username": "alice", "password": "secret"},
                "cart": [
                    {"product": product, "quantity": 1},
                    {"product": product, "quantity": 2},
                ],
            }
        ],
    )

    with pytest.raises(DataLoadError) as info:
        load_users(data_dir)

    assert info.value.path == data_dir / "users.json"


def test_user_cart_is_loaded(data_dir: Path) -> None:
    _write(
        data_dir / "users.json",
        [
            {
                "email": "alice@example.com",
                "login": {"username": "alice", "password": "secret"},
                "cart": [
                    {"product": {"id": "1", "categoryId": "1", "name": "Superglasses"}, "quantity": 2}
                ],
            }
        ],
    )

    (alice,) = load_users(data_dir)

    assert [(e.product.id, e.quantity) for e in alice.cart] == [("1", 2)]
