"""
Core modules for model_stacking.

Contracts for trained models, the method capability table, the exception
taxonomy, configuration and logging.
"""

from .capabilities import (
    CLASSIFICATION,
    REGRESSION,
    SUPPORTED_MODEL_TYPES,
    MethodInfo,
    lookup_method,
    register_method,
    supports_class_probs,
)
from .config import (
    LoggingConfig,
    PackageConfig,
    StackingConfig,
    get_config,
    reset_config,
    set_config,
)
from .contracts import (
    OBS_COL,
    PRED_COL,
    RESAMPLE_COL,
    ROW_INDEX_COL,
    ModelList,
    TrainControl,
    TrainedModel,
)
from .errors import (
    AlignmentError,
    ClassProbabilityError,
    EnsembleValidationError,
    ModelListTypeError,
    ModelTypeMismatchError,
    MulticlassNotSupportedError,
    ObservedMismatchError,
    PredictionsNotSavedError,
    PredictionTypeMismatchError,
    ResampleMismatchError,
    RowIndexMismatchError,
    UnknownMethodError,
    UnsupportedModelTypeError,
)
from .logger import LogContext, get_logger, setup_logging


__all__ = [
    # Capabilities
    "CLASSIFICATION",
    "REGRESSION",
    "SUPPORTED_MODEL_TYPES",
    "MethodInfo",
    "lookup_method",
    "register_method",
    "supports_class_probs",
    # Config
    "LoggingConfig",
    "PackageConfig",
    "StackingConfig",
    "get_config",
    "reset_config",
    "set_config",
    # Contracts
    "OBS_COL",
    "PRED_COL",
    "RESAMPLE_COL",
    "ROW_INDEX_COL",
    "ModelList",
    "TrainControl",
    "TrainedModel",
    # Errors
    "AlignmentError",
    "ClassProbabilityError",
    "EnsembleValidationError",
    "ModelListTypeError",
    "ModelTypeMismatchError",
    "MulticlassNotSupportedError",
    "ObservedMismatchError",
    "PredictionTypeMismatchError",
    "PredictionsNotSavedError",
    "ResampleMismatchError",
    "RowIndexMismatchError",
    "UnknownMethodError",
    "UnsupportedModelTypeError",
    # Logging
    "LogContext",
    "get_logger",
    "setup_logging",
]
