"""
Pydantic contracts for trained models handed to the ensembling layer.

A trained model is produced by an external training routine. Only the fields
needed to check ensembling compatibility and extract out-of-fold predictions
are modelled here; they are validated once, at construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.names import make_unique_names, make_valid_names


# Columns of a retained-predictions frame
PRED_COL = "pred"
OBS_COL = "obs"
ROW_INDEX_COL = "row_index"
RESAMPLE_COL = "resample"

REQUIRED_PRED_COLUMNS: tuple[str, ...] = (PRED_COL, OBS_COL, ROW_INDEX_COL, RESAMPLE_COL)


class TrainControl(BaseModel):
    """Resampling configuration a model was trained with."""

    save_predictions: bool | Literal["all", "final", "none"] = Field(
        default=False, description="Whether hold-out predictions were retained"
    )
    class_probs: bool = Field(default=False, description="Whether class probabilities were computed")
    method: str = Field(default="cv", description="Resampling method label")
    number: int = Field(default=10, ge=1, description="Number of folds or resampling iterations")
    repeats: int | None = Field(default=None, ge=1, description="Repeats for repeated CV")

    @property
    def retains_predictions(self) -> bool:
        """True when out-of-fold predictions were kept after training."""
        if isinstance(self.save_predictions, bool):
            return self.save_predictions
        return self.save_predictions in {"all", "final"}


class TrainedModel(BaseModel):
    """Contract for a trained model entering an ensemble.

    ``pred`` holds one row per (resample fold, original row, hyperparameter
    tune). Classification frames also carry one probability column per class,
    named after the class label.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, protected_namespaces=())

    method: str = Field(..., min_length=1, description="Training-method identifier")
    model_type: str = Field(..., description="Task type tag (Classification or Regression)")
    best_tune: dict[str, Any] = Field(
        ..., min_length=1, description="Selected hyperparameter combination"
    )
    pred: pd.DataFrame | None = Field(default=None, description="Retained out-of-fold predictions")
    control: TrainControl = Field(default_factory=TrainControl)

    @field_validator("best_tune")
    @classmethod
    def tune_keys_are_strings(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Hyperparameter names double as column names."""
        bad = [k for k in v if not isinstance(k, str) or not k]
        if bad:
            raise ValueError(f"best_tune keys must be non-empty strings, got {bad}")
        return v

    @model_validator(mode="after")
    def validate_pred_columns(self) -> TrainedModel:
        """Ensure retained predictions carry the columns the extractor joins on."""
        if self.pred is None or self.pred.empty:
            return self
        expected = [*REQUIRED_PRED_COLUMNS, *self.best_tune]
        missing = [c for c in expected if c not in self.pred.columns]
        if missing:
            raise ValueError(
                f"Retained predictions for '{self.method}' are missing columns: {missing}"
            )
        return self

    @property
    def has_predictions(self) -> bool:
        """True when at least one retained prediction row is available."""
        return self.pred is not None and not self.pred.empty


class ModelList(dict):
    """Ordered, named collection of trained models intended for ensembling.

    Element types are not enforced here; ``check_model_list_classes`` reports
    anything that is not a ``TrainedModel``.
    """

    @classmethod
    def from_models(
        cls,
        models: Mapping[str, Any] | Iterable[Any],
        sep: str = ".",
    ) -> ModelList:
        """
        Build a model list from a mapping or a sequence of models.

        Sequences are named after each model's ``method``, made syntactic and
        unique in first-seen order (``rf``, ``rf.1``, ...).

        Args:
            models: Mapping of name -> model, or an iterable of models
            sep: Separator between a repeated name and its counter

        Returns:
            ModelList preserving input order
        """
        if isinstance(models, ModelList):
            return models
        if isinstance(models, Mapping):
            return cls(models)

        items = list(models)
        methods = [getattr(m, "method", type(m).__name__) for m in items]
        names = make_unique_names(make_valid_names(methods), sep=sep)
        return cls(zip(names, items))

    @property
    def methods(self) -> list[str]:
        """Training-method identifier of each model, in list order."""
        return [getattr(m, "method", type(m).__name__) for m in self.values()]

    def __repr__(self) -> str:
        return f"ModelList({', '.join(self)})"
