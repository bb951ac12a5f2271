"""Tests for the server-rendered product pages."""

from collections.abc import Generator
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from product_manager.dependencies import get_product_service
from product_manager.main import app
from product_manager.services import ProductService
from product_manager.web.products import format_currency
from tests.factories import make_product

MONITOR_FORM = {
    "name": "Monitor",
    "description": "27-inch 4K display for creative work",
    "price": "349.99",
    "quantity": "12",
}


@pytest.fixture
def mock_service() -> AsyncMock:
    """Create a mock product service."""
    return AsyncMock(spec=ProductService)


@pytest.fixture
def client(mock_service: AsyncMock) -> Generator[TestClient, None, None]:
    """Test client with the product service replaced by a mock."""
    app.dependency_overrides[get_product_service] = lambda: mock_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("999.99"), "$999.99"),
        (Decimal("1234.5"), "$1,234.50"),
        (29.99, "$29.99"),
        ("n/a", "n/a"),
    ],
)
def test_format_currency(value: object, expected: str) -> None:
    """Test price formatting for display."""
    assert format_currency(value) == expected


class TestIndex:
    """Tests for the product list page."""

    def test_lists_products(self, client: TestClient, mock_service: AsyncMock) -> None:
        """Test that every product appears with its formatted price."""
        mock_service.get_all.return_value = [
            make_product(1, name="Laptop", price=Decimal("999.99")),
            make_product(2, name="Mouse", price=Decimal("29.99")),
        ]

        response = client.get("/products")

        assert response.status_code == status.HTTP_200_OK
        assert "text/html" in response.headers["content-type"]
        assert "Laptop" in response.text
        assert "$999.99" in response.text
        assert "/products/edit/2" in response.text
        assert "Stock Quantity" in response.text

    def test_empty_catalog(self, client: TestClient, mock_service: AsyncMock) -> None:
        """Test the page shown when there are no products."""
        mock_service.get_all.return_value = []

        response = client.get("/products")

        assert response.status_code == status.HTTP_200_OK
        assert "No products yet." in response.text

    def test_root_redirects_to_index(self, client: TestClient) -> None:
        """Test that the site root sends browsers to the product list."""
        response = client.get("/", follow_redirects=False)

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "http://testserver/products"


class TestDetails:
    """Tests for the product details page."""

    def test_shows_product(self, client: TestClient, mock_service: AsyncMock) -> None:
        """Test that the product's fields are rendered."""
        mock_service.get_by_id.return_value = make_product(
            3, name="Keyboard", description="Mechanical keyboard with RGB backlighting"
        )

        response = client.get("/products/details/3")

        assert response.status_code == status.HTTP_200_OK
        assert "Keyboard" in response.text
        assert "Mechanical keyboard with RGB backlighting" in response.text

    def test_missing_product(self, client: TestClient, mock_service: AsyncMock) -> None:
        """Test that an unknown ID renders the not-found page."""
        mock_service.get_by_id.return_value = None

        response = client.get("/products/details/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Product with ID '999' not found" in response.text


class TestCreate:
    """Tests for the create form."""

    def test_form_renders_empty(self, client: TestClient) -> None:
        """Test that the create form starts blank."""
        response = client.get("/products/create")

        assert response.status_code == status.HTTP_200_OK
        assert 'name="name"' in response.text
        assert 'name="id"' not in response.text

    def test_valid_submission_redirects(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that a valid form is stored and redirects to the list."""
        mock_service.add.return_value = make_product(4, name="Monitor")

        response = client.post(
            "/products/create", data=MONITOR_FORM, follow_redirects=False
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "http://testserver/products"
        mock_service.add.assert_awaited_once()
        submitted = mock_service.add.await_args.args[0]
        assert submitted.name == "Monitor"
        assert submitted.price == Decimal("349.99")
        assert submitted.quantity == 12

    def test_invalid_submission_rerenders_with_errors(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that validation messages are shown and input is kept."""
        response = client.post(
            "/products/create",
            data={**MONITOR_FORM, "name": "", "price": "0"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Product name is required" in response.text
        assert "Price must be between 0.01 and 999,999.99" in response.text
        assert "27-inch 4K display for creative work" in response.text
        mock_service.add.assert_not_awaited()


class TestEdit:
    """Tests for the edit form."""

    def test_form_prefilled(self, client: TestClient, mock_service: AsyncMock) -> None:
        """Test that the edit form carries the stored values and hidden ID."""
        mock_service.get_by_id.return_value = make_product(2, name="Mouse")

        response = client.get("/products/edit/2")

        assert response.status_code == status.HTTP_200_OK
        assert 'value="Mouse"' in response.text
        assert 'name="id" value="2"' in response.text

    def test_form_missing_product(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that editing an unknown product renders the not-found page."""
        mock_service.get_by_id.return_value = None

        response = client.get("/products/edit/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_valid_submission_redirects(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that a valid edit is applied and redirects to the list."""
        mock_service.exists.return_value = True

        response = client.post(
            "/products/edit/2",
            data={**MONITOR_FORM, "id": "2"},
            follow_redirects=False,
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        mock_service.update.assert_awaited_once()
        assert mock_service.update.await_args.args[0].id == 2

    def test_id_mismatch_is_not_found(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that a form for a different product is refused."""
        response = client.post("/products/edit/2", data={**MONITOR_FORM, "id": "3"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        mock_service.update.assert_not_awaited()

    def test_invalid_submission_rerenders_with_errors(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that an invalid edit shows messages without writing."""
        response = client.post(
            "/products/edit/2",
            data={**MONITOR_FORM, "id": "2", "quantity": "-1"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Quantity must be a positive number" in response.text
        mock_service.update.assert_not_awaited()

    def test_vanished_product_is_not_found(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that a product deleted meanwhile is reported as not found."""
        mock_service.exists.return_value = False

        response = client.post("/products/edit/2", data={**MONITOR_FORM, "id": "2"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        mock_service.update.assert_not_awaited()


class TestDelete:
    """Tests for the delete confirmation."""

    def test_confirmation_page(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that the confirmation page shows the product."""
        mock_service.get_by_id.return_value = make_product(1, name="Laptop")

        response = client.get("/products/delete/1")

        assert response.status_code == status.HTTP_200_OK
        assert "Are you sure you want to delete this product?" in response.text
        assert "Laptop" in response.text

    def test_confirmation_missing_product(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that confirming an unknown product renders the not-found page."""
        mock_service.get_by_id.return_value = None

        response = client.get("/products/delete/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_confirmed_delete_redirects(
        self, client: TestClient, mock_service: AsyncMock
    ) -> None:
        """Test that confirming deletes and redirects to the list."""
        response = client.post("/products/delete/1", follow_redirects=False)

        assert response.status_code == status.HTTP_303_SEE_OTHER
        mock_service.delete.assert_awaited_once_with(1)
