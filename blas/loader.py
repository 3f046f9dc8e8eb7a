"""Resolve which level-2 implementation backs the package-level API.

Callers should go through ``get_level2`` rather than instantiating backends
directly so that configuration and caching behave the same everywhere.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from blas.level2 import Level2Interface, NaiveLevel2
from blas.reference import ReferenceLevel2
from core.parameters.global_parameters import GlobalParameters

logger = logging.getLogger("dense_blas")

ENV_VAR = "DENSE_BLAS_LEVEL2"
DEFAULT_BACKEND = "naive"

BACKENDS: dict[str, type[Level2Interface]] = {
    NaiveLevel2.name: NaiveLevel2,
    ReferenceLevel2.name: ReferenceLevel2,
}


@dataclass(frozen=True)
class BackendSpec:
    """Resolved backend instance with the name it was selected by."""

    name: str
    impl: Level2Interface


_CACHE: dict[str, BackendSpec] = {}
_DEFAULT_PARAMS: GlobalParameters | None = None


def apply_parameters(params: GlobalParameters | None) -> None:
    """Use ``params`` whenever a caller does not pass its own.

    This is how a loaded configuration reaches the package-level ``gemv`` and
    ``ger``. Pass ``None`` to go back to the built-in default.
    """
    global _DEFAULT_PARAMS
    _DEFAULT_PARAMS = params
    if params is not None:
        logger.info(f"Level-2 backend configured as '{params.get('level2_backend')}'")


def resolve_backend_name(
    name: str | None = None, params: GlobalParameters | None = None
) -> str:
    """Return the backend name to use.

    Precedence: explicit ``name``, then the ``DENSE_BLAS_LEVEL2`` environment
    variable, then ``params.level2_backend`` (or the parameters registered with
    ``apply_parameters``), then ``"naive"``.
    """
    if name:
        return name.strip().lower()
    env = os.environ.get(ENV_VAR, "").strip()
    if env:
        return env.lower()
    if params is None:
        params = _DEFAULT_PARAMS
    if params is not None:
        configured = params.get("level2_backend")
        if configured:
            return str(configured).strip().lower()
    return DEFAULT_BACKEND


def get_level2_spec(
    name: str | None = None, params: GlobalParameters | None = None
) -> BackendSpec:
    """Return the cached ``BackendSpec`` for the resolved backend name."""
    resolved = resolve_backend_name(name, params)
    spec = _CACHE.get(resolved)
    if spec is not None:
        return spec

    cls = BACKENDS.get(resolved)
    if cls is None:
        logger.error(
            f"Unknown level-2 backend '{resolved}'; available: {sorted(BACKENDS)}"
        )
        raise KeyError(f"Level-2 backend '{resolved}' not found.")

    spec = BackendSpec(name=resolved, impl=cls())
    _CACHE[resolved] = spec
    logger.info(f"Loaded level-2 backend: {resolved}")
    return spec


def get_level2(
    name: str | None = None, params: GlobalParameters | None = None
) -> Level2Interface:
    """Return the level-2 implementation selected by ``name``/env/``params``."""
    return get_level2_spec(name, params).impl


def reset_level2_cache() -> None:
    """Forget resolved backends and applied parameters (mainly for tests)."""
    global _DEFAULT_PARAMS
    _CACHE.clear()
    _DEFAULT_PARAMS = None


__all__ = [
    "BACKENDS",
    "BackendSpec",
    "apply_parameters",
    "get_level2",
    "get_level2_spec",
    "reset_level2_cache",
    "resolve_backend_name",
]
