"""
Deployment profile for the certificate registry.

`ZKCERT_ENV` picks between the production registry parameters and the
scaled-down ones used by the test suite. Subspecs read it once, at import,
to choose their `TARGET_CONFIG` preset (see `subspecs/merkle/constants.py`).
"""

import os

_SUPPORTED_ZKCERT_ENVS: list[str] = ["prod", "test"]

ZKCERT_ENV = os.environ.get("ZKCERT_ENV", "prod").lower()
"""Active profile: 'prod' (depth-32 registry trees, the default) or 'test' (shallow trees)."""

if ZKCERT_ENV not in _SUPPORTED_ZKCERT_ENVS:
    raise ValueError(
        f"Unknown registry profile ZKCERT_ENV={ZKCERT_ENV!r}; "
        f"expected one of {_SUPPORTED_ZKCERT_ENVS}"
    )
