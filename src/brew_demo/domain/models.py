"""
Domain models for the coffee brewing demo.

All models use Pydantic v2 BaseModel for validation and serialization. The
final statistics are printed with `model_dump_json`, so every value type
round-trips cleanly to JSON.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "ON" instead of {"value": "ON"}).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PowerState(str, Enum):
    """Power state of a coffee machine. Brewing is only possible while ON."""

    OFF = "OFF"
    ON = "ON"


class Recipe(BaseModel):
    """Immutable description of a brew.

    Out-of-range values are clamped rather than rejected: strength to
    0..100, water amount and brew time to non-negative numbers.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    strength: int       # Percentage, 0-100
    water_amount: int   # Milliliters
    brew_time: int      # Milliseconds

    @field_validator("strength")
    @classmethod
    def _clamp_strength(cls, value: int) -> int:
        return max(0, min(value, 100))

    @field_validator("water_amount", "brew_time")
    @classmethod
    def _clamp_non_negative(cls, value: int) -> int:
        return max(value, 0)

    def get_name(self) -> str:
        return self.name

    def get_strength(self) -> int:
        return self.strength

    def get_water_amount(self) -> int:
        return self.water_amount

    def get_brew_time(self) -> int:
        return self.brew_time

    def get_description(self) -> str:
        return (
            f"{self.name} - Strength: {self.strength}%, "
            f"Water: {self.water_amount}ml, Time: {self.brew_time}ms"
        )


class RecipeSummary(BaseModel):
    """Condensed view of a recipe, with the brew time rendered in seconds."""

    name: str
    strength: int
    time: str  # e.g. "2s", "3.5s"


# ── Coffee shop ──────────────────────────────────────────────────────


class CustomerOrder(BaseModel):
    """A named customer asking for one recipe."""

    customer: str = Field(..., min_length=1)
    recipe: Recipe


class OrderRecord(BaseModel):
    """One served order. Appended by CoffeeShop, never changed afterwards."""

    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    elapsed_ms: int = Field(..., ge=0)


class ShopStats(BaseModel):
    """Summary derived from the recorded orders of a CoffeeShop."""

    total_orders: int = Field(..., ge=0)
    average_time_ms: int = Field(..., ge=0)  # Rounded; 0 when there are no orders
    popular_recipes: dict[str, int]          # Recipe name -> number of orders
