"""Pydantic schemas and enums for BMI evaluation results."""
from enum import Enum
from pydantic import BaseModel

from ..core.utils import format_bmi


class Category(str, Enum):
    """BMI weight bands, lowest first."""
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE_CLASS_I = "obese_class_i"
    OBESE_CLASS_II = "obese_class_ii"
    OBESE_CLASS_III = "obese_class_iii"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY[self][0]

    @property
    def color(self) -> str:
        """Hex color used by the frontend for this band."""
        return CATEGORY_DISPLAY[self][1]


# (display name, hex color) per category
CATEGORY_DISPLAY = {
    Category.UNDERWEIGHT: ("Underweight", "#3498db"),
    Category.NORMAL: ("Normal weight", "#2d8659"),
    Category.OVERWEIGHT: ("Overweight", "#f39c12"),
    Category.OBESE_CLASS_I: ("Obesity Class I", "#e67e22"),
    Category.OBESE_CLASS_II: ("Obesity Class II", "#d35400"),
    Category.OBESE_CLASS_III: ("Obesity Class III", "#c0392b"),
}


class EvaluationResult(BaseModel):
    bmi: float
    category: Category
    message: str

    model_config = {
        "frozen": True,
    }

    @property
    def color(self) -> str:
        return self.category.color

    def __str__(self) -> str:
        return f"BMI: {format_bmi(self.bmi)} | {self.category.display_name}"
