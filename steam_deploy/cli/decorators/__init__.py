"""CLI decorators"""

from .inputs import action_inputs, environment_options, collect_inputs

__all__ = [
    "action_inputs",
    "environment_options",
    "collect_inputs",
]
