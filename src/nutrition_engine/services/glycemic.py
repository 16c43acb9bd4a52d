"""Glycemic index and glycemic load calculations."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.reference.glycemic import (
    CATEGORY_GLYCEMIC_INDEX,
    DEFAULT_GLYCEMIC_INDEX,
    GLYCEMIC_INDEX,
)
from nutrition_engine.services.aggregation import nutrient_of


@dataclass(frozen=True)
class GlycemicEngine:
    """Resolve per-food GI and derive glycemic load across entries."""

    index: Mapping[str, float] = field(default_factory=lambda: GLYCEMIC_INDEX)
    category_defaults: Mapping[str, float] = field(
        default_factory=lambda: CATEGORY_GLYCEMIC_INDEX
    )
    default_gi: float = DEFAULT_GLYCEMIC_INDEX

    def gi_of(self, entry: FoodEntry) -> float:
        """Return the GI of an entry from the curated table or its category."""
        if entry.taxonomy_key and entry.taxonomy_key.lower() in self.index:
            return self.index[entry.taxonomy_key.lower()]

        name = entry.normalized_name
        for key in sorted(self.index, key=len, reverse=True):
            if key in name:
                return self.index[key]
        return self.category_defaults.get(entry.category, self.default_gi)

    def load_of(self, entry: FoodEntry) -> float:
        """Return the glycemic load of one entry."""
        return self.gi_of(entry) * nutrient_of(entry, "carbs") / 100

    def glycemic_load(self, entries: Iterable[FoodEntry]) -> float:
        """Sum glycemic load across entries."""
        return sum((self.load_of(entry) for entry in entries), 0.0)

    def weighted_gi(self, entries: Iterable[FoodEntry]) -> float:
        """Carbohydrate-weighted GI; the neutral default when there are no carbs."""
        weighted = 0.0
        total_carbs = 0.0
        for entry in entries:
            carbs = nutrient_of(entry, "carbs")
            if carbs > 0:
                weighted += self.gi_of(entry) * carbs
                total_carbs += carbs
        if total_carbs == 0:
            return self.default_gi
        return weighted / total_carbs
