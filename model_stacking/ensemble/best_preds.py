"""Extraction of out-of-fold predictions for each model's selected tune."""

from __future__ import annotations

from typing import Any

import pandas as pd

from ..core.contracts import RESAMPLE_COL, ROW_INDEX_COL, TrainedModel
from ..core.errors import ModelListTypeError, PredictionsNotSavedError
from ..core.logger import get_logger
from .utils import named_models


logger = get_logger("best_preds")


def best_preds(model: TrainedModel) -> pd.DataFrame:
    """Extract the retained predictions for the best tune of a model.

    The best-tune record is used as a one-row join key over every
    hyperparameter column; only matching prediction rows are kept. The result
    is sorted by resample fold, then original row index.

    Args:
        model: Trained model with retained predictions

    Returns:
        DataFrame of best-tune predictions with a fresh RangeIndex

    Raises:
        ModelListTypeError: If ``model`` is not a TrainedModel
        PredictionsNotSavedError: If predictions were not retained
    """
    if not isinstance(model, TrainedModel):
        raise ModelListTypeError(f"Expected a TrainedModel, got {type(model).__name__}")
    if not model.control.retains_predictions or not model.has_predictions:
        raise PredictionsNotSavedError(
            f"Model '{model.method}' was trained without saving predictions. "
            "Re-run it with save_predictions enabled in the training control."
        )

    keys = list(model.best_tune)
    tune = pd.DataFrame([model.best_tune], columns=keys)

    matched = model.pred.merge(tune, on=keys, how="inner")
    matched = matched.sort_values([RESAMPLE_COL, ROW_INDEX_COL], kind="mergesort")
    return matched.reset_index(drop=True)


def extract_best_preds(list_of_models: Any) -> dict[str, pd.DataFrame]:
    """Apply best_preds() to every model, preserving order and names."""
    library = {}
    for name, model in named_models(list_of_models):
        library[name] = best_preds(model)
        logger.debug(f"{name}: {len(library[name])} best-tune predictions")
    return library
