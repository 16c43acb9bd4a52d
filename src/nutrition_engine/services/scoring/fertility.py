"""Female and male fertility nutrition scoring.

Each scorer runs three independent rule lists over the same metrics: the
overall score and the reproductive-health and hormonal-balance sub-scores.
Fertility foods and harmful foods are detected by keyword in entry names.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import FertilityScore, NutritionalSupport
from nutrition_engine.reference import fertility as ref
from nutrition_engine.services.aggregation import protein_calorie_ratio, total_of
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.scoring.rules import Rule, apply_rules


@dataclass(frozen=True)
class FertilityMetrics:
    """Inputs to the fertility rules."""

    folate: float
    iron: float
    vitamin_d: float
    omega3: float
    antioxidants: float
    zinc: float
    selenium: float
    vitamin_c: float
    vitamin_e: float
    fiber: float
    protein_ratio: float
    glycemic_load: float
    fertility_foods: tuple[str, ...] = ()
    harmful_foods: tuple[str, ...] = ()


def nutritional_support(score: float) -> NutritionalSupport:
    """Map a fertility score onto a support label."""
    if score >= 80:
        return NutritionalSupport.OPTIMAL
    if score >= 60:
        return NutritionalSupport.GOOD
    return NutritionalSupport.NEEDS_IMPROVEMENT


def _fertility_food_rule() -> Rule[FertilityMetrics]:
    return Rule(
        "fertility_foods",
        lambda m: bool(m.fertility_foods),
        ref.FERTILITY_FOOD_BONUS,
        per=lambda m: len(m.fertility_foods),
    )


def _missing_fertility_foods_rule(suggestion: str) -> Rule[FertilityMetrics]:
    return Rule(
        "no_fertility_foods",
        lambda m: not m.fertility_foods,
        recommendations=(suggestion,),
    )


def _harmful_food_rules(
    harmful: Mapping[str, str], penalty: float
) -> tuple[Rule[FertilityMetrics], ...]:
    return tuple(
        Rule(
            f"harmful:{keyword}",
            lambda m, keyword=keyword: keyword in m.harmful_foods,
            penalty,
            warnings=(warning,),
        )
        for keyword, warning in harmful.items()
    )


_FEMALE_FOODS_HINT = (
    "Add fertility-supporting foods such as leafy greens, lentils, salmon, and berries"
)
_MALE_FOODS_HINT = (
    "Add fertility-supporting foods such as oysters, pumpkin seeds, and walnuts"
)

FEMALE_SCORE_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule(
        "folate_adequate",
        lambda m: m.folate >= ref.FOLATE_TARGET_MCG,
        15,
        recommendations=("Great folate intake supports early fetal development",),
    ),
    Rule(
        "folate_low",
        lambda m: m.folate < ref.FOLATE_TARGET_MCG / 2,
        -10,
        warnings=("Low folate intake; aim for at least 400 mcg daily",),
        recommendations=(
            "Add leafy greens, legumes, and fortified grains for folate",
        ),
    ),
    Rule("iron_adequate", lambda m: m.iron >= ref.IRON_TARGET_MG, 10),
    Rule(
        "iron_low",
        lambda m: m.iron < ref.IRON_LOW_MG,
        -10,
        warnings=("Low iron intake may affect ovulation",),
        recommendations=(
            "Pair iron-rich foods like lentils and spinach with vitamin C sources",
        ),
    ),
    Rule("vitamin_d_adequate", lambda m: m.vitamin_d >= ref.VITAMIN_D_TARGET_MCG, 5),
    Rule(
        "vitamin_d_low",
        lambda m: m.vitamin_d < ref.VITAMIN_D_LOW_MCG,
        recommendations=("Consider vitamin D-rich foods like fatty fish and eggs",),
    ),
    Rule("omega3_adequate", lambda m: m.omega3 >= ref.OMEGA3_TARGET_G, 10),
    Rule(
        "omega3_low",
        lambda m: m.omega3 < ref.OMEGA3_TARGET_G,
        recommendations=("Add omega-3 sources such as salmon, walnuts, or chia seeds",),
    ),
    Rule("antioxidants", lambda m: m.antioxidants > ref.ANTIOXIDANT_TARGET, 5),
    Rule(
        "glycemic_load_high",
        lambda m: m.glycemic_load > ref.GLYCEMIC_LOAD_HIGH,
        -10,
        warnings=("High glycemic load can disrupt ovulatory hormones",),
    ),
    _fertility_food_rule(),
    _missing_fertility_foods_rule(_FEMALE_FOODS_HINT),
    *_harmful_food_rules(ref.FEMALE_HARMFUL_FOODS, ref.HARMFUL_FOOD_PENALTY),
)

FEMALE_REPRODUCTIVE_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule("folate_adequate", lambda m: m.folate >= ref.FOLATE_TARGET_MCG, 20),
    Rule("folate_low", lambda m: m.folate < ref.FOLATE_TARGET_MCG / 2, -15),
    Rule("iron_adequate", lambda m: m.iron >= ref.IRON_TARGET_MG, 15),
    Rule("iron_low", lambda m: m.iron < ref.IRON_LOW_MG, -10),
    Rule("antioxidants", lambda m: m.antioxidants > ref.ANTIOXIDANT_TARGET, 10),
    Rule("vitamin_c", lambda m: m.vitamin_c >= ref.VITAMIN_C_TARGET_MG, 5),
    Rule(
        "harmful_foods",
        lambda m: bool(m.harmful_foods),
        -10,
        per=lambda m: len(m.harmful_foods),
    ),
)

FEMALE_HORMONAL_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule("vitamin_d_adequate", lambda m: m.vitamin_d >= ref.VITAMIN_D_TARGET_MCG, 15),
    Rule("vitamin_d_low", lambda m: m.vitamin_d < ref.VITAMIN_D_LOW_MCG, -10),
    Rule("omega3_adequate", lambda m: m.omega3 >= ref.OMEGA3_TARGET_G, 20),
    Rule("glycemic_load_low", lambda m: m.glycemic_load < ref.GLYCEMIC_LOAD_LOW, 10),
    Rule("glycemic_load_high", lambda m: m.glycemic_load > ref.GLYCEMIC_LOAD_HIGH, -15),
    Rule("fiber_high", lambda m: m.fiber > ref.FIBER_HIGH_G, 5),
    Rule("protein_adequate", lambda m: m.protein_ratio >= ref.PROTEIN_RATIO_TARGET, 5),
)

MALE_SCORE_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule(
        "zinc_adequate",
        lambda m: m.zinc >= ref.ZINC_TARGET_MG,
        15,
        recommendations=("Great zinc intake supports sperm production",),
    ),
    Rule(
        "zinc_low",
        lambda m: m.zinc < ref.ZINC_LOW_MG,
        -10,
        warnings=("Low zinc intake may reduce sperm quality",),
        recommendations=(
            "Add zinc-rich foods like oysters, pumpkin seeds, and lean beef",
        ),
    ),
    Rule("selenium_adequate", lambda m: m.selenium >= ref.SELENIUM_TARGET_MCG, 10),
    Rule(
        "selenium_low",
        lambda m: m.selenium < ref.SELENIUM_LOW_MCG,
        recommendations=("Include selenium sources such as Brazil nuts and fish",),
    ),
    Rule("vitamin_c_adequate", lambda m: m.vitamin_c >= ref.VITAMIN_C_TARGET_MG, 5),
    Rule(
        "vitamin_c_low",
        lambda m: m.vitamin_c < ref.VITAMIN_C_TARGET_MG / 2,
        recommendations=(
            "Add vitamin C-rich fruits and vegetables to protect sperm cells",
        ),
    ),
    Rule("vitamin_e_adequate", lambda m: m.vitamin_e >= ref.VITAMIN_E_TARGET_MG, 5),
    Rule("folate_adequate", lambda m: m.folate >= ref.FOLATE_TARGET_MCG, 5),
    Rule("antioxidants", lambda m: m.antioxidants > ref.ANTIOXIDANT_TARGET, 5),
    Rule("omega3_adequate", lambda m: m.omega3 >= ref.OMEGA3_TARGET_G, 5),
    _fertility_food_rule(),
    _missing_fertility_foods_rule(_MALE_FOODS_HINT),
    *_harmful_food_rules(ref.MALE_HARMFUL_FOODS, ref.HARMFUL_FOOD_PENALTY),
)

MALE_REPRODUCTIVE_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule("zinc_adequate", lambda m: m.zinc >= ref.ZINC_TARGET_MG, 20),
    Rule("zinc_low", lambda m: m.zinc < ref.ZINC_LOW_MG, -15),
    Rule("selenium_adequate", lambda m: m.selenium >= ref.SELENIUM_TARGET_MCG, 15),
    Rule("vitamin_c", lambda m: m.vitamin_c >= ref.VITAMIN_C_TARGET_MG, 5),
    Rule("vitamin_e", lambda m: m.vitamin_e >= ref.VITAMIN_E_TARGET_MG, 5),
    Rule("antioxidants", lambda m: m.antioxidants > ref.ANTIOXIDANT_TARGET, 5),
    Rule(
        "harmful_foods",
        lambda m: bool(m.harmful_foods),
        -10,
        per=lambda m: len(m.harmful_foods),
    ),
)

MALE_HORMONAL_RULES: tuple[Rule[FertilityMetrics], ...] = (
    Rule("zinc_adequate", lambda m: m.zinc >= ref.ZINC_TARGET_MG, 10),
    Rule("vitamin_d_adequate", lambda m: m.vitamin_d >= ref.VITAMIN_D_TARGET_MCG, 15),
    Rule("vitamin_d_low", lambda m: m.vitamin_d < ref.VITAMIN_D_LOW_MCG, -10),
    Rule("omega3_adequate", lambda m: m.omega3 >= ref.OMEGA3_TARGET_G, 10),
    Rule("glycemic_load_high", lambda m: m.glycemic_load > ref.GLYCEMIC_LOAD_HIGH, -10),
    Rule(
        "harmful_foods",
        lambda m: bool(m.harmful_foods),
        -5,
        per=lambda m: len(m.harmful_foods),
    ),
)


def _keywords_present(
    entries: Sequence[FoodEntry], keywords: Iterable[str]
) -> tuple[str, ...]:
    names = [entry.normalized_name for entry in entries]
    return tuple(
        keyword for keyword in keywords if any(keyword in name for name in names)
    )


@dataclass(frozen=True)
class FertilityScorer:
    """Score fertility-supporting nutrition for one sex's rule set."""

    score_rules: tuple[Rule[FertilityMetrics], ...]
    reproductive_rules: tuple[Rule[FertilityMetrics], ...]
    hormonal_rules: tuple[Rule[FertilityMetrics], ...]
    fertility_foods: tuple[str, ...]
    harmful_foods: tuple[str, ...]
    glycemic: GlycemicEngine = field(default_factory=GlycemicEngine)

    def metrics(self, entries: Iterable[FoodEntry]) -> FertilityMetrics:
        materialized = list(entries)
        return FertilityMetrics(
            folate=total_of(materialized, "folate"),
            iron=total_of(materialized, "iron"),
            vitamin_d=total_of(materialized, "vitamin-d"),
            omega3=total_of(materialized, "omega-3"),
            antioxidants=total_of(materialized, "antioxidants"),
            zinc=total_of(materialized, "zinc"),
            selenium=total_of(materialized, "selenium"),
            vitamin_c=total_of(materialized, "vitamin-c"),
            vitamin_e=total_of(materialized, "vitamin-e"),
            fiber=total_of(materialized, "fiber"),
            protein_ratio=protein_calorie_ratio(materialized),
            glycemic_load=self.glycemic.glycemic_load(materialized),
            fertility_foods=_keywords_present(materialized, self.fertility_foods),
            harmful_foods=_keywords_present(materialized, self.harmful_foods),
        )

    def analyze(self, entries: Iterable[FoodEntry]) -> FertilityScore:
        metrics = self.metrics(entries)
        outcome = apply_rules(metrics, self.score_rules)
        reproductive = apply_rules(metrics, self.reproductive_rules)
        hormonal = apply_rules(metrics, self.hormonal_rules)
        return FertilityScore(
            score=outcome.score,
            reproductive_health=reproductive.score,
            hormonal_balance=hormonal.score,
            nutritional_support=nutritional_support(outcome.score),
            fertility_foods=list(metrics.fertility_foods),
            harmful_foods=list(metrics.harmful_foods),
            recommendations=list(dict.fromkeys(outcome.recommendations)),
            warnings=list(dict.fromkeys(outcome.warnings)),
        )


def female_fertility_scorer(glycemic: GlycemicEngine | None = None) -> FertilityScorer:
    """Build the scorer keyed on folate, iron, vitamin D and omega-3."""
    return FertilityScorer(
        score_rules=FEMALE_SCORE_RULES,
        reproductive_rules=FEMALE_REPRODUCTIVE_RULES,
        hormonal_rules=FEMALE_HORMONAL_RULES,
        fertility_foods=ref.FEMALE_FERTILITY_FOODS,
        harmful_foods=tuple(ref.FEMALE_HARMFUL_FOODS),
        glycemic=glycemic or GlycemicEngine(),
    )


def male_fertility_scorer(glycemic: GlycemicEngine | None = None) -> FertilityScorer:
    """Build the scorer keyed on zinc, selenium, vitamins C/E and antioxidants."""
    return FertilityScorer(
        score_rules=MALE_SCORE_RULES,
        reproductive_rules=MALE_REPRODUCTIVE_RULES,
        hormonal_rules=MALE_HORMONAL_RULES,
        fertility_foods=ref.MALE_FERTILITY_FOODS,
        harmful_foods=tuple(ref.MALE_HARMFUL_FOODS),
        glycemic=glycemic or GlycemicEngine(),
    )
