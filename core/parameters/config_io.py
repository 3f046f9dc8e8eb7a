# config_io.py
import json
import logging

import yaml

from core.parameters.global_parameters import GlobalParameters

logger = logging.getLogger("dense_blas")


def load_data(filename):
    """Load a configuration mapping from a JSON or YAML file.

    Expected format:
    {
        "global_parameters": {
            "level2_backend": "naive",
            "benchmark_sizes": [16, 64],
            ...
        }
    }"""
    filename_str = str(filename)
    with open(filename_str, "r") as f:
        if filename_str.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif filename_str.endswith(".json"):
            data = json.load(f)
        else:
            logger.error(f"Unsupported file format for: {filename_str}")
            raise ValueError(f"Unsupported file format for: {filename_str}")

    return data or {}


def parameters_from_data(
    data: dict, base: GlobalParameters | None = None, source="<data>"
) -> GlobalParameters:
    """Return parameters with ``data["global_parameters"]`` applied."""
    if not isinstance(data, dict):
        logger.error(f"Configuration in {source} must be a mapping")
        raise ValueError(f"Configuration in {source} must be a mapping")

    params = base if base is not None else GlobalParameters()
    overrides = data.get("global_parameters", {})
    if not isinstance(overrides, dict):
        logger.error(f"global_parameters in {source} must be a mapping")
        raise ValueError(f"global_parameters in {source} must be a mapping")

    params.update(overrides)

    repeats = params.get("benchmark_repeats")
    if isinstance(repeats, str):
        try:
            params.set("benchmark_repeats", int(repeats))
        except ValueError:
            logger.warning(
                "global_parameters.benchmark_repeats should be an integer; got %r",
                repeats,
            )
    return params


def load_parameters(filename, base: GlobalParameters | None = None) -> GlobalParameters:
    """Return parameters with the file's ``global_parameters`` applied."""
    params = parameters_from_data(load_data(filename), base, source=filename)
    logger.info(f"Loaded parameters from {filename}")
    return params
