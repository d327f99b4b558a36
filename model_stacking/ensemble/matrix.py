"""Assembly of the observation vector and prediction matrix used for stacking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from ..core.capabilities import CLASSIFICATION
from ..core.config import get_config
from ..core.contracts import OBS_COL, PRED_COL, ModelList
from ..core.errors import ClassProbabilityError
from ..core.logger import LogContext, get_logger
from ..utils.names import make_unique_names, make_valid_names
from .best_preds import extract_best_preds
from .checks import (
    check_bestpreds_indexes,
    check_bestpreds_obs,
    check_bestpreds_preds,
    check_bestpreds_resamples,
    check_model_list_classes,
    check_model_list_types,
    extract_model_types,
)
from .utils import named_models


logger = get_logger("matrix")


@dataclass
class PredObsMatrix:
    """Observed values and per-model out-of-fold predictions."""

    obs: pd.Series
    preds: pd.DataFrame
    type: str

    @property
    def n_models(self) -> int:
        return self.preds.shape[1]

    def to_numpy(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (X, y) arrays ready for a meta-model."""
        return self.preds.to_numpy(dtype=float), self.obs.to_numpy()


def positive_class(obs: pd.Series) -> Any:
    """Second distinct observed value, in order of first appearance."""
    levels = obs.drop_duplicates().tolist()
    if len(levels) < 2:
        raise ClassProbabilityError(
            f"Cannot pick a positive class from {len(levels)} observed value(s)"
        )
    return levels[1]


def _probability_column(frame: pd.DataFrame, label: Any, model_name: str) -> pd.Series:
    for key in (label, str(label)):
        if key in frame.columns:
            return frame[key]
    raise ClassProbabilityError(
        f"Model '{model_name}' has no probability column for class '{label}'. "
        f"Available columns: {list(frame.columns)}"
    )


def column_names(methods: list[str]) -> list[str]:
    """Unique prediction-matrix column names for the given method identifiers."""
    settings = get_config().stacking
    names = make_valid_names(methods) if settings.sanitize_names else [str(m) for m in methods]
    return make_unique_names(names, sep=settings.name_separator)


def make_pred_obs_matrix(list_of_models: Any) -> PredObsMatrix:
    """Make a prediction matrix from a list of models.

    Validates the list, extracts best-tune predictions, validates their
    alignment, then takes the observed values from the first model and one
    prediction column per model: the numeric prediction for regression, the
    probability of the positive class for classification.

    Args:
        list_of_models: ModelList, mapping of name -> TrainedModel, or sequence

    Returns:
        PredObsMatrix with columns in list order, named after each model's method
    """
    with LogContext("matrix", "Assembling prediction matrix"):
        models = ModelList(named_models(list_of_models))

        check_model_list_classes(models)
        check_model_list_types(models)

        model_library = extract_best_preds(models)

        check_bestpreds_resamples(model_library)
        check_bestpreds_indexes(model_library)
        check_bestpreds_obs(model_library)
        check_bestpreds_preds(model_library)

        model_type = extract_model_types(models)

        first = next(iter(model_library.values()))
        obs = first[OBS_COL].reset_index(drop=True)

        if model_type == CLASSIFICATION:
            positive = positive_class(obs)
            logger.info(f"Using '{positive}' as the positive class")
            columns = [
                pd.to_numeric(_probability_column(frame, positive, name)).to_numpy(dtype=float)
                for name, frame in model_library.items()
            ]
        else:
            columns = [
                pd.to_numeric(frame[PRED_COL]).to_numpy(dtype=float)
                for frame in model_library.values()
            ]

        methods = [model.method for model in models.values()]
        preds = pd.DataFrame(np.column_stack(columns), columns=column_names(methods))

        logger.info(
            f"{model_type} prediction matrix: {preds.shape[0]} rows x {preds.shape[1]} models"
        )
        return PredObsMatrix(obs=obs, preds=preds, type=model_type)
