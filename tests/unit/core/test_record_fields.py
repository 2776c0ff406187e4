"""Unit tests for required field access."""

from __future__ import annotations

import pytest

from core.errors import InvalidRecordError
from core.record_fields import require_field, require_non_negative
from core.types import Product


def test_require_field_returns_present_value() -> None:
    """Present values should be returned unchanged."""
    product = Product(id=1, name="Lamp", category="Home", price=12.0, quantity=0)

    assert require_field(product, "category") == "Home"
    assert require_non_negative(product, "quantity") == 0


def test_require_field_raises_for_absent_attribute() -> None:
    """Unknown attributes count as missing."""
    product = Product(id=1, name="Lamp", category="Home", price=12.0)

    with pytest.raises(InvalidRecordError) as error_info:
        require_field(product, "colour")

    assert error_info.value.field_name == "colour"
    assert "record id=1" in str(error_info.value)


def test_require_non_negative_rejects_negative_price() -> None:
    """Negative numbers should be rejected with the field named."""
    product = Product(id=2, name="Refund", category="Home", price=-1.0)

    with pytest.raises(InvalidRecordError, match="price"):
        require_non_negative(product, "price")
