import json
import os
import sys

import pytest
import yaml

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.parameters.config_io import load_data, load_parameters, parameters_from_data
from core.parameters.global_parameters import GlobalParameters


def test_global_parameters_attribute_and_dict_access_are_consistent():
    params = GlobalParameters()
    assert params.level2_backend == "naive"

    params.set("level2_backend", "reference")
    assert params.get("level2_backend") == "reference"
    assert params.level2_backend == "reference"

    params.benchmark_repeats = 9
    assert params.get("benchmark_repeats") == 9
    assert "benchmark_repeats" in params


def test_unknown_attribute_raises_attribute_error():
    params = GlobalParameters()
    with pytest.raises(AttributeError):
        params.does_not_exist
    assert params.get("does_not_exist") is None


def test_load_parameters_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "global_parameters": {
                    "level2_backend": "reference",
                    "benchmark_sizes": [4, 8],
                    "benchmark_repeats": "3",
                }
            }
        )
    )

    params = load_parameters(path)

    assert params.level2_backend == "reference"
    assert params.benchmark_sizes == [4, 8]
    assert params.benchmark_repeats == 3


def test_load_parameters_from_json_updates_base(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"global_parameters": {"seed": 42}}))
    base = GlobalParameters({"level2_backend": "reference"})

    params = load_parameters(path, base=base)

    assert params is base
    assert params.seed == 42
    assert params.level2_backend == "reference"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_data(path) == {}
    assert load_parameters(path).level2_backend == "naive"


def test_unsupported_suffix_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("")
    with pytest.raises(ValueError):
        load_data(path)


def test_non_mapping_global_parameters_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"global_parameters": [1, 2]}))
    with pytest.raises(ValueError):
        load_parameters(path)


def test_top_level_list_raises_value_error(tmp_path, caplog):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with caplog.at_level("ERROR", logger="dense_blas"):
        with pytest.raises(ValueError):
            load_parameters(path)
    assert any("must be a mapping" in rec.message for rec in caplog.records)


def test_parameters_from_data_rejects_scalars():
    with pytest.raises(ValueError):
        parameters_from_data(3)
    assert parameters_from_data({}).level2_backend == "naive"
