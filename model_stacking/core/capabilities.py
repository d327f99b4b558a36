"""
Capability table for training methods.

Maps a training-method identifier (the ``method`` of a trained model) to what
the method can do: which task types it supports and whether it can produce
class probabilities. Classification ensembles need the latter, so the list
validators look it up here instead of probing model objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UnknownMethodError


CLASSIFICATION = "Classification"
REGRESSION = "Regression"

SUPPORTED_MODEL_TYPES: tuple[str, ...] = (CLASSIFICATION, REGRESSION)


@dataclass(frozen=True)
class MethodInfo:
    """Declared capabilities of one training method."""

    method: str
    label: str = ""
    model_types: tuple[str, ...] = field(default=SUPPORTED_MODEL_TYPES)
    prob_model: bool = True

    def supports(self, model_type: str) -> bool:
        """Check whether the method can be trained for ``model_type``."""
        return model_type in self.model_types


_BOTH = SUPPORTED_MODEL_TYPES
_CLASS_ONLY = (CLASSIFICATION,)
_REG_ONLY = (REGRESSION,)

# Built-in methods; extend with register_method()
_METHODS: dict[str, MethodInfo] = {
    info.method: info
    for info in (
        MethodInfo("glm", "Generalized Linear Model", _BOTH, True),
        MethodInfo("glmnet", "Lasso and Elastic-Net Regularized GLM", _BOTH, True),
        MethodInfo("lm", "Linear Regression", _REG_ONLY, False),
        MethodInfo("lda", "Linear Discriminant Analysis", _CLASS_ONLY, True),
        MethodInfo("knn", "k-Nearest Neighbors", _BOTH, True),
        MethodInfo("nb", "Naive Bayes", _CLASS_ONLY, True),
        MethodInfo("rpart", "CART", _BOTH, True),
        MethodInfo("treebag", "Bagged CART", _BOTH, True),
        MethodInfo("rf", "Random Forest", _BOTH, True),
        MethodInfo("ranger", "Random Forest", _BOTH, True),
        MethodInfo("gbm", "Stochastic Gradient Boosting", _BOTH, True),
        MethodInfo("xgbTree", "eXtreme Gradient Boosting", _BOTH, True),
        MethodInfo("svmLinear", "Support Vector Machines with Linear Kernel", _BOTH, True),
        MethodInfo("svmRadial", "Support Vector Machines with Radial Basis Function Kernel", _BOTH, True),
        MethodInfo("nnet", "Neural Network", _BOTH, True),
        MethodInfo("earth", "Multivariate Adaptive Regression Spline", _BOTH, True),
        MethodInfo("pls", "Partial Least Squares", _BOTH, True),
        MethodInfo("rFerns", "Random Ferns", _CLASS_ONLY, False),
    )
}


def register_method(info: MethodInfo, overwrite: bool = False) -> MethodInfo:
    """
    Add a training method to the capability table.

    Args:
        info: Capabilities of the method
        overwrite: Replace an existing entry with the same identifier

    Returns:
        The registered MethodInfo
    """
    if not info.method:
        raise ValueError("Method identifier must be a non-empty string")
    if info.method in _METHODS and not overwrite:
        raise ValueError(f"Method '{info.method}' is already registered")
    _METHODS[info.method] = info
    return info


def lookup_method(method: str) -> MethodInfo:
    """
    Resolve the capabilities of a training method.

    Raises:
        UnknownMethodError: If the method was never registered
    """
    try:
        return _METHODS[method]
    except KeyError:
        raise UnknownMethodError(
            f"Model '{method}' is not in the capability table. "
            "Register it with register_method() before ensembling."
        ) from None


def supports_class_probs(method: str) -> bool:
    """Return True when ``method`` can generate class probabilities."""
    return lookup_method(method).prob_model
