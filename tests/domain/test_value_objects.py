"""Unit tests for domain value objects."""

import pytest

from franchises.domain.exceptions import ValidationError
from franchises.domain.model.value_objects import Name, StockQuantity


# ── Name ─────────────────────────────────────────────────────────────────────


class TestName:

    def test_of_trims_whitespace(self):
        assert Name.of("  Nequi  ", "Franchise").value == "Nequi"

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Franchise name is required"):
            Name.of(None, "Franchise")

    @pytest.mark.parametrize("raw", ["", " ", "\t\n"])
    def test_blank_rejected(self, raw):
        with pytest.raises(ValidationError, match="Branch name is required"):
            Name.of(raw, "Branch")

    def test_direct_construction_rejects_blank(self):
        with pytest.raises(ValidationError, match="cannot be blank"):
            Name("   ")

    def test_direct_construction_rejects_untrimmed(self):
        with pytest.raises(ValidationError, match="must be trimmed"):
            Name(" Pan")

    def test_str(self):
        assert str(Name("Centro")) == "Centro"


# ── StockQuantity ────────────────────────────────────────────────────────────


class TestStockQuantity:

    def test_valid_quantity(self):
        assert StockQuantity(5).value == 5

    def test_zero_allowed(self):
        assert StockQuantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="zero or greater"):
            StockQuantity(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity("3")  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity(True)

    def test_of_rejects_missing(self):
        with pytest.raises(ValidationError, match="is required"):
            StockQuantity.of(None)

    def test_of_rejects_negative(self):
        with pytest.raises(ValidationError, match="zero or greater"):
            StockQuantity.of(-5)

    def test_clamped_defaults_missing_to_zero(self):
        assert StockQuantity.clamped(None).value == 0

    def test_clamped_turns_negative_into_zero(self):
        assert StockQuantity.clamped(-5).value == 0

    def test_clamped_keeps_positive(self):
        assert StockQuantity.clamped(12).value == 12

    def test_int_and_str(self):
        assert int(StockQuantity(7)) == 7
        assert str(StockQuantity(7)) == "7"

    @pytest.mark.parametrize("raw", ["5", 2.5, True])
    def test_clamped_rejects_non_integers(self, raw):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockQuantity.clamped(raw)
