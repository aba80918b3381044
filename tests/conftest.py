import os
import sys

import pytest

# Disable preallocation unless explicitly set.
os.environ.setdefault("XLA_PYTHON_CLIENT_PREALLOCATE", "false")

import jax

# Ensure repo root and src/ are importable when pytest uses importlib mode.
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)


@pytest.fixture(autouse=True)
def _set_default_device():
    with jax.default_device(jax.devices("cpu")[0]):
        yield
