"""Utility functions for ensemble operations."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..core.contracts import ModelList
from ..core.errors import ModelListTypeError


def named_models(list_of_models: Any) -> list[tuple[str, Any]]:
    """Normalize a model collection to ordered (name, model) pairs.

    Mappings keep their names; other iterables are named after each model's
    method, as ModelList.from_models() does.
    """
    if isinstance(list_of_models, Mapping):
        return [(str(name), model) for name, model in list_of_models.items()]
    if isinstance(list_of_models, Iterable) and not isinstance(list_of_models, (str, bytes)):
        return list(ModelList.from_models(list_of_models).items())
    raise ModelListTypeError(
        f"Expected a ModelList or a collection of trained models, got {type(list_of_models).__name__}"
    )
