"""Self-test entry point: evaluates a few fixed profiles and prints the results.

Run from project root:
    python main.py
"""
import sys

from bmicalc_app.core.config import configure_logging
from bmicalc_app.core.errors import InvalidInput
from bmicalc_app.services.evaluator import evaluate, log_evaluation

# (weight kg, height m): normal weight, overweight, underweight
SAMPLE_PROFILES = [
    (70.0, 1.75),
    (85.0, 1.70),
    (55.0, 1.75),
]


def main() -> int:
    configure_logging()
    try:
        for i, (weight, height) in enumerate(SAMPLE_PROFILES):
            result = evaluate(weight, height)
            log_evaluation(weight, height, result)
            print(f"Message: {result.message}")
            if i == 0:
                print(f"Color: {result.color}")
            print()
    except InvalidInput as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
