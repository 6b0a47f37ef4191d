"""bmicalc_app package init — keep imports lightweight to avoid side-effects.

Modules should be imported explicitly from their full paths, e.g.
`from bmicalc_app.services.evaluator import evaluate` or
`from bmicalc_app.core.config import get_settings`.
"""

__all__ = []
