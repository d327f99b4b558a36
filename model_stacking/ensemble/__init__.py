"""Ensemble module for checking model lists and building stacking inputs.

This module validates that trained models can be ensembled together and
extracts their aligned out-of-fold predictions.
"""

from .best_preds import best_preds, extract_best_preds
from .checks import (
    check_bestpreds_indexes,
    check_bestpreds_obs,
    check_bestpreds_preds,
    check_bestpreds_resamples,
    check_model_list_classes,
    check_model_list_types,
    extract_model_types,
    prediction_kind,
)
from .matrix import PredObsMatrix, column_names, make_pred_obs_matrix, positive_class
from .utils import named_models


__all__ = [
    # Main export
    "make_pred_obs_matrix",
    "PredObsMatrix",
    # Model list checks
    "check_model_list_classes",
    "check_model_list_types",
    "extract_model_types",
    # Extraction
    "best_preds",
    "extract_best_preds",
    # Model library checks
    "check_bestpreds_resamples",
    "check_bestpreds_indexes",
    "check_bestpreds_obs",
    "check_bestpreds_preds",
    "prediction_kind",
    # Utility functions
    "column_names",
    "named_models",
    "positive_class",
]
