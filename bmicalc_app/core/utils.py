"""Utility helpers for the BMI calculator."""


def calculate_bmi(weight: float, height: float) -> float:
    """Body Mass Index: weight / height².

    weight: kg, height: m
    No rounding is applied; callers format for display.
    """
    return weight / (height * height)


def format_bmi(bmi: float) -> str:
    """Short display form: at most two decimals, trailing zeros dropped."""
    text = f"{bmi:.2f}".rstrip('0').rstrip('.')
    return text or '0'
