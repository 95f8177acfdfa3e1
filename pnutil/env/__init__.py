# pnutil/env

import os

__all__ = ["env_bool"]


_true_values = frozenset(["true", "1", "yes", "on"])


def env_bool(name, environ=None):
    if environ is None:
        environ = os.environ
    v = environ.get(name)
    return v is not None and v.lower() in _true_values
