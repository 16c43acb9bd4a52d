"""Models for logged food entries and their nutrients."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NutrientCategory(str, Enum):
    """Nutrient grouping used for summaries."""

    MACRONUTRIENT = "macronutrient"
    VITAMIN = "vitamin"
    MINERAL = "mineral"
    OTHER = "other"


class NutrientAmount(BaseModel):
    """Amount of a single nutrient; ``id`` is the aggregation key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    amount: float = Field(ge=0.0)
    unit: str
    category: NutrientCategory = NutrientCategory.OTHER
    daily_value: float | None = Field(default=None, alias="dailyValue", gt=0.0)

    def scaled(self, multiplier: float) -> "NutrientAmount":
        """Return a validated copy with the amount multiplied."""
        return NutrientAmount.model_validate(
            {**self.model_dump(), "amount": self.amount * multiplier}
        )


class FoodEntry(BaseModel):
    """Logged food entry as provided by the storage or parsing collaborators."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    quantity: float = Field(gt=0.0)
    unit: str
    calories: float
    nutrients: tuple[NutrientAmount, ...] = ()
    category: str = ""
    date_added: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC), alias="dateAdded"
    )
    taxonomy_key: str | None = Field(default=None, alias="taxonomyKey")

    @property
    def normalized_name(self) -> str:
        """Lower-cased, stripped name used for keyword matching."""
        return self.name.strip().lower()
