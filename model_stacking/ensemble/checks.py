"""Compatibility checks for model lists and model libraries.

Two layers of checks:

- model list checks run on the trained models themselves (record kind, task
  type, binary target, class-probability support);
- model library checks run on the best-tune predictions extracted from each
  model and make sure they line up row for row.

Every check returns None on success and raises on the first violation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd
from pandas.api import types as ptypes

from ..core.capabilities import CLASSIFICATION, SUPPORTED_MODEL_TYPES, lookup_method
from ..core.contracts import (
    OBS_COL,
    PRED_COL,
    RESAMPLE_COL,
    ROW_INDEX_COL,
    TrainedModel,
)
from ..core.errors import (
    ClassProbabilityError,
    ModelListTypeError,
    ModelTypeMismatchError,
    MulticlassNotSupportedError,
    ObservedMismatchError,
    PredictionsNotSavedError,
    PredictionTypeMismatchError,
    ResampleMismatchError,
    RowIndexMismatchError,
    UnsupportedModelTypeError,
)
from ..core.logger import get_logger
from .utils import named_models


logger = get_logger("checks")


# =============================================================================
# Model list checks
# =============================================================================


def check_model_list_classes(list_of_models: Any) -> None:
    """Check that every element of the list is a trained model.

    Args:
        list_of_models: ModelList, mapping of name -> model, or sequence of models

    Raises:
        ModelListTypeError: If the collection or any element has the wrong kind
    """
    items = named_models(list_of_models)
    if not items:
        raise ModelListTypeError("Model list is empty")

    bad = [f"{name} ({type(model).__name__})" for name, model in items if not isinstance(model, TrainedModel)]
    if bad:
        raise ModelListTypeError(
            "All elements of the model list must be trained models. Offending entries: "
            + ", ".join(bad)
        )


def check_model_list_types(list_of_models: Any) -> None:
    """Check that all models share a supported task type.

    For classification lists, also checks that the target is binary and that
    every model can produce, and was trained to produce, class probabilities.

    Raises:
        ModelTypeMismatchError: Mixed task types
        UnsupportedModelTypeError: Task type other than Classification/Regression, or a
            classification list holding a regression-only method
        PredictionsNotSavedError: First model retained no predictions
        MulticlassNotSupportedError: Target without exactly two classes
        ClassProbabilityError: Missing class probability support or output
    """
    items = named_models(list_of_models)
    model_type = _shared_model_type(items)

    if model_type != CLASSIFICATION:
        return

    _, first = items[0]
    if not first.has_predictions:
        raise PredictionsNotSavedError(
            "No predictions saved by train. Please re-run models with "
            "save_predictions enabled in the training control."
        )

    n_classes = first.pred[OBS_COL].nunique(dropna=False)
    if n_classes != 2:
        raise MulticlassNotSupportedError(
            f"Not yet implemented for multiclass problems: found {n_classes} observed classes, "
            "ensembling requires exactly 2"
        )

    capabilities = {name: lookup_method(model.method) for name, model in items}

    wrong_task = [
        f"{name} ({info.label or info.method})"
        for name, info in capabilities.items()
        if not info.supports(CLASSIFICATION)
    ]
    if wrong_task:
        raise UnsupportedModelTypeError(
            "The following models use methods that cannot be trained for classification: "
            + ", ".join(wrong_task)
        )

    no_prob_support = [name for name, info in capabilities.items() if not info.prob_model]
    if no_prob_support:
        raise ClassProbabilityError(
            "All models for classification must be able to generate class probabilities. "
            "Models without probability support: " + ", ".join(no_prob_support)
        )

    bad_models = [name for name, model in items if not model.control.class_probs]
    if bad_models:
        raise ClassProbabilityError(
            "The following models were fit with no class probabilities: "
            + ", ".join(bad_models)
            + ".\nPlease re-fit them with class_probs=True in the training control"
        )


def _shared_model_type(items: list[tuple[str, Any]]) -> str:
    types = [getattr(model, "model_type", None) for _, model in items]
    if not types:
        raise ModelListTypeError("Model list is empty")

    distinct = list(dict.fromkeys(types))
    if len(distinct) != 1:
        detail = ", ".join(f"{name}={t}" for (name, _), t in zip(items, types))
        raise ModelTypeMismatchError(
            f"All models must have the same type, found {distinct} ({detail})"
        )

    model_type = distinct[0]
    if model_type not in SUPPORTED_MODEL_TYPES:
        raise UnsupportedModelTypeError(
            f"Model type '{model_type}' is not supported; expected one of {list(SUPPORTED_MODEL_TYPES)}"
        )
    return model_type


def extract_model_types(list_of_models: Any) -> str:
    """Return the task type shared by every model in the list."""
    return _shared_model_type(named_models(list_of_models))


# =============================================================================
# Model library checks
# =============================================================================


def _mismatched_models(model_library: Mapping[str, pd.DataFrame], column: str) -> list[str]:
    """Names of models whose ``column`` differs from the first model's."""
    names = list(model_library)
    if len(names) < 2:
        return []

    reference = model_library[names[0]][column].reset_index(drop=True)
    return [
        name
        for name in names[1:]
        if not reference.equals(model_library[name][column].reset_index(drop=True))
    ]


def check_bestpreds_resamples(model_library: Mapping[str, pd.DataFrame]) -> None:
    """Check that every model was resampled with the same folds."""
    bad = _mismatched_models(model_library, RESAMPLE_COL)
    if bad:
        raise ResampleMismatchError(
            "Component models do not have the same re-sampling strategies. "
            f"Differs from '{next(iter(model_library))}': {', '.join(bad)}"
        )


def check_bestpreds_indexes(model_library: Mapping[str, pd.DataFrame]) -> None:
    """Check that every model predicted the same original rows, in the same order."""
    bad = _mismatched_models(model_library, ROW_INDEX_COL)
    if bad:
        raise RowIndexMismatchError(
            "Re-sampled predictions from each component model do not use the same "
            f"row indexes from the original dataset. Mismatched models: {', '.join(bad)}"
        )


def check_bestpreds_obs(model_library: Mapping[str, pd.DataFrame]) -> None:
    """Check that every model saw the same observed target values."""
    bad = _mismatched_models(model_library, OBS_COL)
    if bad:
        raise ObservedMismatchError(
            "Observed values for each component model are not the same. "
            "Please re-train the models with the same Y variable. "
            f"Mismatched models: {', '.join(bad)}"
        )


def prediction_kind(values: pd.Series) -> str:
    """Structural kind of a prediction column: numeric, categorical, boolean or other."""
    if ptypes.is_bool_dtype(values):
        return "boolean"
    if ptypes.is_numeric_dtype(values):
        return "numeric"
    if (
        isinstance(values.dtype, pd.CategoricalDtype)
        or ptypes.is_object_dtype(values)
        or ptypes.is_string_dtype(values)
    ):
        return "categorical"
    return "other"


def check_bestpreds_preds(model_library: Mapping[str, pd.DataFrame]) -> None:
    """Check that every model produced the same kind of predictions."""
    kinds = {name: prediction_kind(frame[PRED_COL]) for name, frame in model_library.items()}
    distinct = list(dict.fromkeys(kinds.values()))
    if len(distinct) > 1:
        detail = ", ".join(f"{name}={kind}" for name, kind in kinds.items())
        raise PredictionTypeMismatchError(
            "Component models do not all have the same type of predictions. "
            f"Predictions are a mix of {', '.join(distinct)} ({detail})."
        )
    logger.debug(f"Prediction kind for {len(kinds)} models: {distinct[0] if distinct else 'n/a'}")
