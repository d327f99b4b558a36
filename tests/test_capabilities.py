"""Tests for the method capability table."""

import pytest

from model_stacking.core import (
    CLASSIFICATION,
    REGRESSION,
    MethodInfo,
    ModelList,
    UnknownMethodError,
    UnsupportedModelTypeError,
    capabilities,
    lookup_method,
    register_method,
    supports_class_probs,
)
from model_stacking.ensemble import check_model_list_types


@pytest.fixture
def custom_method(monkeypatch):
    """Register a throwaway method on a private copy of the table."""
    monkeypatch.setattr(capabilities, "_METHODS", dict(capabilities._METHODS))
    return register_method(MethodInfo("myBoost", "Custom boosting", (CLASSIFICATION,), True))


class TestLookup:
    """Tests for resolving method capabilities."""

    def test_known_method(self):
        info = lookup_method("rf")
        assert info.prob_model is True
        assert info.supports(CLASSIFICATION)
        assert info.supports(REGRESSION)

    def test_regression_only_method_has_no_probabilities(self):
        assert supports_class_probs("lm") is False
        assert not lookup_method("lm").supports(CLASSIFICATION)

    def test_unknown_method_raises(self):
        with pytest.raises(UnknownMethodError, match="not in the capability table"):
            lookup_method("doesNotExist")

    def test_unknown_method_is_key_error(self):
        with pytest.raises(KeyError):
            supports_class_probs("doesNotExist")


class TestRegistration:
    """Tests for extending the capability table."""

    def test_register_custom(self, custom_method):
        assert lookup_method("myBoost") is custom_method

    def test_duplicate_rejected(self, custom_method):
        with pytest.raises(ValueError, match="already registered"):
            register_method(MethodInfo("myBoost"))

    def test_overwrite(self, custom_method):
        replacement = register_method(MethodInfo("myBoost", prob_model=False), overwrite=True)
        assert lookup_method("myBoost") is replacement
        assert supports_class_probs("myBoost") is False

    def test_empty_identifier_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            register_method(MethodInfo(""))

    def test_custom_method_used_by_classification_checks(self, custom_method, classification_models):
        models = dict(classification_models)
        models["rpart"] = models["rpart"].model_copy(update={"method": "myBoost"})
        assert check_model_list_types(ModelList(models)) is None

    def test_custom_task_types_enforced(self, custom_method, classification_models):
        register_method(MethodInfo("myBoost", "Custom boosting", (REGRESSION,), True), overwrite=True)
        models = dict(classification_models)
        models["rpart"] = models["rpart"].model_copy(update={"method": "myBoost"})
        with pytest.raises(UnsupportedModelTypeError, match="Custom boosting"):
            check_model_list_types(ModelList(models))
