"""Pytest configuration and fixtures."""

import numpy as np
import pandas as pd
import pytest
from sklearn.datasets import make_classification, make_regression
from sklearn.linear_model import LogisticRegression, Ridge
from sklearn.model_selection import KFold
from sklearn.neighbors import KNeighborsRegressor
from sklearn.tree import DecisionTreeClassifier

from model_stacking.core import ModelList, TrainControl, TrainedModel, reset_config


N_SAMPLES = 60
N_FOLDS = 3


def retained_predictions(make_estimator, param, values, X, y, folds, classification=False):
    """Out-of-fold predictions for every tune, as a training routine would retain them."""
    frames = []
    for value in values:
        for i, (train_idx, test_idx) in enumerate(folds):
            estimator = make_estimator(**{param: value}).fit(X[train_idx], y[train_idx])
            frame = pd.DataFrame(
                {
                    "pred": estimator.predict(X[test_idx]),
                    "obs": y[test_idx],
                    "row_index": test_idx,
                    "resample": f"Fold{i + 1}",
                    param: value,
                }
            )
            if classification:
                proba = estimator.predict_proba(X[test_idx])
                for j, label in enumerate(estimator.classes_):
                    frame[label] = proba[:, j]
            frames.append(frame)

    # shuffled so extraction has to restore (resample, row_index) order
    combined = pd.concat(frames, ignore_index=True)
    return combined.sample(frac=1.0, random_state=0).reset_index(drop=True)


@pytest.fixture(autouse=True)
def clean_config():
    """Each test starts from a fresh global configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def folds():
    """Shared fold assignments."""
    splitter = KFold(n_splits=N_FOLDS, shuffle=True, random_state=0)
    return list(splitter.split(np.arange(N_SAMPLES)))


@pytest.fixture
def regression_data():
    """Generate sample regression dataset."""
    X, y = make_regression(n_samples=N_SAMPLES, n_features=4, noise=0.5, random_state=0)
    return X, y


@pytest.fixture
def classification_data():
    """Generate sample binary classification dataset."""
    X, y = make_classification(
        n_samples=N_SAMPLES,
        n_features=4,
        n_informative=2,
        n_redundant=0,
        random_state=0,
    )
    return X, np.where(y == 1, "yes", "no").astype(object)


@pytest.fixture
def regression_models(regression_data, folds):
    """Two regression models trained on the same folds."""
    X, y = regression_data
    control = TrainControl(save_predictions="all", method="cv", number=N_FOLDS)

    ridge = TrainedModel(
        method="glmnet",
        model_type="Regression",
        best_tune={"alpha": 1.0},
        pred=retained_predictions(Ridge, "alpha", [0.1, 1.0], X, y, folds),
        control=control,
    )
    knn = TrainedModel(
        method="knn",
        model_type="Regression",
        best_tune={"n_neighbors": 5},
        pred=retained_predictions(KNeighborsRegressor, "n_neighbors", [3, 5], X, y, folds),
        control=control,
    )
    return ModelList.from_models([ridge, knn])


@pytest.fixture
def classification_models(classification_data, folds):
    """Two binary classification models with class probabilities."""
    X, y = classification_data
    control = TrainControl(save_predictions=True, class_probs=True, number=N_FOLDS)

    logistic = TrainedModel(
        method="glm",
        model_type="Classification",
        best_tune={"C": 1.0},
        pred=retained_predictions(LogisticRegression, "C", [0.1, 1.0], X, y, folds, classification=True),
        control=control,
    )
    tree = TrainedModel(
        method="rpart",
        model_type="Classification",
        best_tune={"max_depth": 2},
        pred=retained_predictions(
            DecisionTreeClassifier, "max_depth", [2, 4], X, y, folds, classification=True
        ),
        control=control,
    )
    return ModelList.from_models([logistic, tree])


@pytest.fixture
def n_samples():
    """Number of rows in the generated datasets."""
    return N_SAMPLES
