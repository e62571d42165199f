# global_parameters.py

import json
from pathlib import Path

import yaml


class GlobalParameters:
    def __init__(self, initial_params=None):
        """
        all parameters are defined with underscore, _, instead of spaces
        """
        self._params = {
            # Added to edge lengths before normalising, and the lower bound on
            # the projected fan area below which the centroid falls back to
            # the vertex average.
            "vsmall": 1.0e-300,
            # Seed length for longest-edge searches.
            "small": 1.0e-15,
        }
        if initial_params:
            self.update(initial_params)

    def __getattr__(self, name):
        """Attribute access for known parameter keys.

        ``global_params.vsmall`` and ``global_params.get("vsmall")`` read the
        same value from the internal ``_params`` dict.
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


def resolve(global_params):
    """Return ``global_params``, or a fresh default set when it is None."""
    return GlobalParameters() if global_params is None else global_params


def load_parameters(filename):
    """Load tolerances from a YAML or JSON file.

    Expected format::

        vsmall: 1.0e-300
        small: 1.0e-15

    A top-level ``global_parameters`` mapping is also accepted.
    """
    filename_str = str(filename)
    with open(Path(filename_str), "r") as f:
        if filename_str.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif filename_str.endswith(".json"):
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported parameter file format: {filename_str} "
                "(expected .yaml, .yml or .json)"
            )

    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Parameter file {filename_str} must contain a mapping.")
    data = data.get("global_parameters", data)
    return GlobalParameters({str(k).replace(" ", "_"): v for k, v in data.items()})
