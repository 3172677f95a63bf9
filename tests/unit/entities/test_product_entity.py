"""Tests for the Product and ProductOption domain entities."""

from uuid import UUID

import pytest
from pydantic import ValidationError

from src.app.entities import Product, ProductOption


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation(self):
        """Test product entity creation with required fields."""
        product = Product(
            name="Product 1 Name",
            description="Product 1 Description",
            price=1.11,
            delivery_price=1.1,
        )

        assert product.name == "Product 1 Name"
        assert product.description == "Product 1 Description"
        assert product.price == 1.11
        assert product.delivery_price == 1.1
        UUID(product.id)  # Raises ValueError if invalid

    def test_product_accepts_camel_case_input(self):
        """Wire payloads use deliveryPrice."""
        product = Product.model_validate(
            {"name": "A", "description": "B", "price": 1, "deliveryPrice": 2}
        )

        assert product.delivery_price == 2

    def test_product_serializes_camel_case(self):
        product = Product(
            id="p-1", name="A", description="B", price=1.5, delivery_price=0.5
        )

        assert product.model_dump(by_alias=True) == {
            "id": "p-1",
            "name": "A",
            "description": "B",
            "price": 1.5,
            "deliveryPrice": 0.5,
        }

    @pytest.mark.parametrize(
        "missing", ["name", "description", "price", "delivery_price"]
    )
    def test_product_requires_every_field(self, missing: str):
        data = {"name": "A", "description": "B", "price": 1, "delivery_price": 1}
        del data[missing]

        with pytest.raises(ValidationError):
            Product(**data)

    def test_product_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            Product(name="", description="B", price=1, delivery_price=1)

    def test_product_rejects_negative_prices(self):
        with pytest.raises(ValidationError):
            Product(name="A", description="B", price=-0.01, delivery_price=1)
        with pytest.raises(ValidationError):
            Product(name="A", description="B", price=1, delivery_price=-1)

    @pytest.mark.parametrize("field", ["name", "description"])
    @pytest.mark.parametrize("blank", [" ", "   ", "\t\n"])
    def test_product_rejects_blank_text(self, field: str, blank: str):
        data = {"name": "A", "description": "B", "price": 1, "delivery_price": 1}
        data[field] = blank

        with pytest.raises(ValidationError):
            Product(**data)

    def test_product_keeps_surrounding_whitespace(self):
        product = Product(name=" Lamp ", description="B", price=1, delivery_price=1)
        assert product.name == " Lamp "

    @pytest.mark.parametrize("field", ["price", "delivery_price"])
    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_product_rejects_non_finite_prices(self, field: str, value: float):
        data = {"name": "A", "description": "B", "price": 1, "delivery_price": 1}
        data[field] = value

        with pytest.raises(ValidationError):
            Product(**data)

    def test_product_zero_price_is_valid(self):
        product = Product(name="Free", description="Gift", price=0, delivery_price=0)
        assert product.price == 0


class TestProductOptionEntity:
    """Test ProductOption domain entity."""

    def test_option_creation(self):
        option = ProductOption(
            name="PO 1 Name", description="PO 1 Description", product_id="p-1"
        )

        assert option.name == "PO 1 Name"
        assert option.product_id == "p-1"
        assert option.id is not None

    def test_option_never_serializes_product_id(self):
        """The owning product is internal linkage only."""
        option = ProductOption(
            id="o-1", name="PO", description="Desc", product_id="p-1"
        )

        assert option.model_dump(by_alias=True) == {
            "id": "o-1",
            "name": "PO",
            "description": "Desc",
        }
        assert "productId" not in option.model_dump_json(by_alias=True)

    def test_option_product_id_is_optional_on_input(self):
        """Clients never send productId; the URL provides it."""
        option = ProductOption.model_validate({"name": "PO", "description": "Desc"})
        assert option.product_id is None

    def test_option_requires_name_and_description(self):
        with pytest.raises(ValidationError):
            ProductOption(description="Desc")
        with pytest.raises(ValidationError):
            ProductOption(name="PO", description="")

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_option_rejects_blank_text(self, field: str):
        data = {"name": "PO", "description": "Desc"}
        data[field] = "   "

        with pytest.raises(ValidationError):
            ProductOption(**data)
