"""
Tests for the Category enum and EvaluationResult model
"""
import pytest
from pydantic import ValidationError

from bmicalc_app.schemas.schemas import CATEGORY_DISPLAY, Category, EvaluationResult


class TestCategory:
    """Display attributes per band"""

    def test_display_attributes(self):
        assert Category.UNDERWEIGHT.display_name == "Underweight"
        assert Category.UNDERWEIGHT.color == "#3498db"
        assert Category.NORMAL.display_name == "Normal weight"
        assert Category.NORMAL.color == "#2d8659"
        assert Category.OVERWEIGHT.color == "#f39c12"
        assert Category.OBESE_CLASS_I.color == "#e67e22"
        assert Category.OBESE_CLASS_II.color == "#d35400"
        assert Category.OBESE_CLASS_III.display_name == "Obesity Class III"
        assert Category.OBESE_CLASS_III.color == "#c0392b"

    def test_every_category_has_display(self):
        assert set(CATEGORY_DISPLAY) == set(Category)

    def test_order(self):
        """Members are declared from lowest to highest band"""
        assert [c.name for c in Category] == [
            "UNDERWEIGHT", "NORMAL", "OVERWEIGHT",
            "OBESE_CLASS_I", "OBESE_CLASS_II", "OBESE_CLASS_III",
        ]


class TestEvaluationResult:
    """Result value object"""

    def test_immutable(self, normal_result):
        with pytest.raises(ValidationError):
            normal_result.bmi = 30.0

    def test_color_follows_category(self, normal_result):
        assert normal_result.color == "#2d8659"

    def test_str(self, normal_result):
        assert str(normal_result) == "BMI: 22.86 | Normal weight"

    def test_str_drops_trailing_zeros(self):
        result = EvaluationResult(bmi=25.0, category=Category.OVERWEIGHT, message="consider regular physical activity")
        assert str(result) == "BMI: 25 | Overweight"

    def test_equality_by_value(self, normal_result):
        same = EvaluationResult(bmi=normal_result.bmi, category=Category.NORMAL, message=normal_result.message)
        assert same == normal_result

    def test_serialization(self, normal_result):
        data = normal_result.model_dump(mode="json")
        assert data == {
            "bmi": 22.857142857142858,
            "category": "normal",
            "message": "keep maintaining your healthy weight",
        }
