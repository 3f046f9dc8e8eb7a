# global_parameters.py


class GlobalParameters:
    def __init__(self, initial_params=None):
        """
        all parameters are defined with underscore, _, instead of spaces
        """
        self._params = {
            # Level-2 implementation used by the package-level gemv/ger:
            #   "naive"     – column-major loops with zero-skip fast paths.
            #   "reference" – literal definition, strict IEEE propagation.
            # Takes effect once passed to blas.apply_parameters; the
            # DENSE_BLAS_LEVEL2 environment variable takes precedence.
            "level2_backend": "naive",
            # Square problem sizes and timing repeats for benchmarks.
            "benchmark_sizes": [16, 64, 128],
            "benchmark_repeats": 5,
            "seed": 0,
        }
        if initial_params:
            self.update(initial_params)

    def __getattr__(self, name):
        """Attribute access for known parameter keys.

        Callers read parameters both as attributes
        (e.g. ``params.level2_backend``) and through ``get``; the canonical
        storage is the internal ``_params`` dict.
        """
        params = self.__dict__.get("_params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(
            f"{type(self).__name__!s} object has no attribute {name!r}"
        )

    def __setattr__(self, name, value):
        """Attribute assignment for known parameter keys."""
        if name == "_params":
            object.__setattr__(self, name, value)
            return
        params = self.__dict__.get("_params")
        if params is not None and name in params:
            params[name] = value
            return
        object.__setattr__(self, name, value)

    def get(self, key, default=None):
        """Retrieve a parameter value, or return a default if not found."""
        return self._params.get(key, default)

    def set(self, key, value):
        """Set or update a parameter."""
        self._params[key] = value

    def update(self, params):
        """Update multiple parameters at once."""
        self._params.update(params)

    def __contains__(self, key):
        return key in self._params

    def __repr__(self):
        return f"GlobalParameters({self._params})"

    def to_dict(self):
        """Convert the parameters to a dictionary for serialization."""
        return self._params
