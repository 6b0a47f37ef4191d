"""BMI evaluation: validate inputs, compute the index, classify and annotate.

Usage:
    from bmicalc_app.services.evaluator import evaluate, log_evaluation

    result = evaluate(70, 1.75)
    log_evaluation(70, 1.75, result)
"""
import logging
from typing import Callable, Optional

from ..core.config import get_settings
from ..core.errors import InvalidInput
from ..core.utils import calculate_bmi
from ..schemas.schemas import Category, EvaluationResult

logger = logging.getLogger("bmicalc_app.evaluator")

MAX_WEIGHT_KG = 500.0
MIN_HEIGHT_M = 0.5
MAX_HEIGHT_M = 2.5

# Exclusive upper bounds, checked in ascending order
BMI_THRESHOLDS = (
    (18.5, Category.UNDERWEIGHT),
    (25.0, Category.NORMAL),
    (30.0, Category.OVERWEIGHT),
    (35.0, Category.OBESE_CLASS_I),
    (40.0, Category.OBESE_CLASS_II),
)

URGENT_GUIDANCE = "seek professional guidance urgently"
DEFAULT_RECOMMENDATION = "consult a health professional"

RECOMMENDATIONS = {
    Category.UNDERWEIGHT: "consult a nutritionist for healthy weight gain",
    Category.NORMAL: "keep maintaining your healthy weight",
    Category.OVERWEIGHT: "consider regular physical activity",
    Category.OBESE_CLASS_I: URGENT_GUIDANCE,
    Category.OBESE_CLASS_II: URGENT_GUIDANCE,
    Category.OBESE_CLASS_III: URGENT_GUIDANCE,
}


def _validate(weight: float, height: float) -> None:
    # Order matters: it decides the message when several limits are broken.
    # Written as a negation so NaN is rejected too.
    if not (weight > 0 and height > 0):
        raise InvalidInput("weight and height must be greater than zero")
    if weight > MAX_WEIGHT_KG:
        raise InvalidInput("invalid weight: maximum 500kg")
    if height < MIN_HEIGHT_M or height > MAX_HEIGHT_M:
        raise InvalidInput("invalid height: must be between 0.5m and 2.5m")


def classify(bmi: float) -> Category:
    """Map a BMI value to its band. Upper bounds are exclusive."""
    for bound, category in BMI_THRESHOLDS:
        if bmi < bound:
            return category
    return Category.OBESE_CLASS_III


def recommendation_for(category: Category) -> str:
    return RECOMMENDATIONS.get(category, DEFAULT_RECOMMENDATION)


def evaluate(weight: float, height: float) -> EvaluationResult:
    """Compute and classify BMI.

    weight: kg, height: m
    Raises InvalidInput when weight or height is out of range; nothing is
    logged or recorded in that case.
    """
    _validate(weight, height)
    bmi = calculate_bmi(weight, height)
    category = classify(bmi)
    return EvaluationResult(bmi=bmi, category=category, message=recommendation_for(category))


def format_evaluation(weight: float, height: float, result: EvaluationResult) -> str:
    return (
        f"[BMI] Weight: {weight:.2f} kg | Height: {height:.2f} m | "
        f"BMI: {result.bmi:.2f} | Category: {result.category.display_name}"
    )


def _default_sink() -> Callable[[str], None]:
    sink = get_settings().LOG_SINK.strip().lower()
    if sink == 'stdout':
        return print
    if sink == 'logger':
        return logger.info
    raise ValueError(f"Unknown LOG_SINK '{sink}', expected 'stdout' or 'logger'")


def log_evaluation(
    weight: float,
    height: float,
    result: EvaluationResult,
    sink: Optional[Callable[[str], None]] = None,
) -> None:
    """Write one summary line for an evaluation.

    `sink` receives the formatted line; when omitted the configured LOG_SINK
    is used. Errors raised by the sink are not caught.
    """
    if sink is None:
        sink = _default_sink()
    sink(format_evaluation(weight, height, result))
