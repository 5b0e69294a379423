"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from franchises.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Name:
    """A non-blank, trimmed display name."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Name must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValidationError("Name cannot be blank")
        if self.value != self.value.strip():
            raise ValidationError("Name must be trimmed")

    def __str__(self) -> str:
        return self.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: str | None, label: str) -> Name:
        """Trim *raw* and wrap it, naming *label* in the error if it is blank."""
        if not isinstance(raw, str) or not raw.strip():
            raise ValidationError(f"{label} name is required")
        return Name(raw.strip())


@dataclass(frozen=True)
class StockQuantity:
    """A stock level: an integer that is never negative."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful stock level
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(
                f"Stock quantity must be zero or greater, got {self.value}"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(raw: int | None) -> StockQuantity:
        """Strict factory used on updates: missing or negative is rejected."""
        if raw is None:
            raise ValidationError("Stock quantity is required")
        return StockQuantity(raw)

    @staticmethod
    def clamped(raw: int | None) -> StockQuantity:
        """Lenient factory used on creation: missing or negative becomes 0."""
        if raw is None:
            return StockQuantity(0)
        quantity_type_ok = isinstance(raw, int) and not isinstance(raw, bool)
        if quantity_type_ok and raw < 0:
            return StockQuantity(0)
        # Non-integers reach __post_init__ and are rejected there
        return StockQuantity(raw)
