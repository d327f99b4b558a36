"""
Exceptions raised while validating model lists and model libraries.

Every failure is fatal to the current call. Each class maps to one family of
problems so callers can catch as broadly or as narrowly as they need.
"""

from __future__ import annotations


class EnsembleValidationError(ValueError):
    """Base class for all model list / model library validation failures."""

    pass


# === Model list errors ===


class ModelListTypeError(EnsembleValidationError, TypeError):
    """Raised when the collection or one of its elements is not a trained model."""

    pass


class ModelTypeMismatchError(EnsembleValidationError):
    """Raised when models in a list declare different task types."""

    pass


class UnsupportedModelTypeError(EnsembleValidationError):
    """Raised when the task type is neither Classification nor Regression."""

    pass


class PredictionsNotSavedError(EnsembleValidationError):
    """Raised when a model was trained without retaining resampled predictions."""

    pass


class MulticlassNotSupportedError(EnsembleValidationError):
    """Raised when a classification target does not have exactly two classes."""

    pass


class ClassProbabilityError(EnsembleValidationError):
    """Raised when classification models cannot or did not produce class probabilities."""

    pass


class UnknownMethodError(EnsembleValidationError, KeyError):
    """Raised when a training method is missing from the capability table."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument
        return str(self.args[0]) if self.args else ""


# === Model library errors ===


class AlignmentError(EnsembleValidationError):
    """Raised when best-tune predictions are not aligned across models."""

    pass


class ResampleMismatchError(AlignmentError):
    pass


class RowIndexMismatchError(AlignmentError):
    pass


class ObservedMismatchError(AlignmentError):
    pass


class PredictionTypeMismatchError(AlignmentError):
    pass
