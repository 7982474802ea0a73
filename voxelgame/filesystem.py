"""Resolution of asset paths against the project root."""

from __future__ import annotations

import os

ROOT_ENV_VAR = "LOGL_ROOT_PATH"
_CONFIGURED_ROOT = ""
_BINARY_RELATIVE_PREFIX = "../../../"


def root_directory() -> str:
    """Project root from the environment, or the configured default."""
    return os.environ.get(ROOT_ENV_VAR, _CONFIGURED_ROOT)


def get_path(path: str) -> str:
    """Return ``path`` resolved against the project root."""
    root = root_directory()
    if root:
        return f"{root}/{path}"
    return _BINARY_RELATIVE_PREFIX + path