import os
import sys

import pytest
import yaml

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import blas
from blas.level2 import NaiveLevel2
from blas.loader import (
    ENV_VAR,
    apply_parameters,
    get_level2,
    get_level2_spec,
    reset_level2_cache,
    resolve_backend_name,
)
from blas.reference import ReferenceLevel2
from core.parameters.config_io import load_parameters
from core.parameters.global_parameters import GlobalParameters
from core.transposition import NoTranspose
from matrix.dense import DenseMatrix, DenseVector


def test_default_backend_is_naive():
    assert resolve_backend_name() == "naive"
    assert isinstance(get_level2(), NaiveLevel2)


def test_precedence_explicit_then_env_then_params(monkeypatch):
    params = GlobalParameters({"level2_backend": "reference"})
    assert resolve_backend_name(params=params) == "reference"

    monkeypatch.setenv(ENV_VAR, "NAIVE")
    assert resolve_backend_name(params=params) == "naive"

    assert resolve_backend_name(" Reference ", params=params) == "reference"


def test_instances_are_cached_until_reset():
    first = get_level2_spec("reference")
    assert first.name == "reference"
    assert isinstance(first.impl, ReferenceLevel2)
    assert get_level2("reference") is first.impl

    reset_level2_cache()
    assert get_level2("reference") is not first.impl


def test_unknown_backend_raises_key_error_and_logs(caplog):
    with caplog.at_level("ERROR", logger="dense_blas"):
        with pytest.raises(KeyError):
            get_level2("fortran")
    assert any("Unknown level-2 backend 'fortran'" in r.message for r in caplog.records)


def test_package_level_api_follows_environment(monkeypatch):
    monkeypatch.setenv(ENV_VAR, "reference")
    a = DenseMatrix.from_rows([[float("nan")]])
    y = DenseVector([1.0])

    blas.gemv(NoTranspose, 1.0, a, DenseVector([0.0]), 1.0, y)

    # The reference backend does not skip the zero entry of x.
    assert y[0] != y[0]


def test_configured_backend_reaches_package_api(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"global_parameters": {"level2_backend": "reference"}}))
    a = DenseMatrix.from_rows([[float("nan")]])

    y = DenseVector([1.0])
    blas.gemv(NoTranspose, 1.0, a, DenseVector([0.0]), 1.0, y)
    assert y[0] == 1.0

    apply_parameters(load_parameters(path))
    assert isinstance(get_level2(), ReferenceLevel2)

    y = DenseVector([1.0])
    blas.gemv(NoTranspose, 1.0, a, DenseVector([0.0]), 1.0, y)
    assert y[0] != y[0]


def test_environment_still_overrides_applied_parameters(monkeypatch):
    apply_parameters(GlobalParameters({"level2_backend": "reference"}))
    monkeypatch.setenv(ENV_VAR, "naive")
    assert isinstance(get_level2(), NaiveLevel2)


def test_reset_forgets_applied_parameters():
    apply_parameters(GlobalParameters({"level2_backend": "reference"}))
    reset_level2_cache()
    assert resolve_backend_name() == "naive"
