"""Minimal configuration helpers for the RustFS demo."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

REGION_ENV = "RUSTFS_REGION"
ACCESS_KEY_ID_ENV = "RUSTFS_ACCESS_KEY_ID"
SECRET_ACCESS_KEY_ENV = "RUSTFS_SECRET_ACCESS_KEY"
ENDPOINT_URL_ENV = "RUSTFS_ENDPOINT_URL"

REQUIRED_ENV_VARS = (REGION_ENV, ACCESS_KEY_ID_ENV, SECRET_ACCESS_KEY_ENV, ENDPOINT_URL_ENV)


@dataclass(frozen=True)
class RustFSConfig:
    """Pulled from environment variables."""

    region: str
    access_key_id: str
    secret_access_key: str = field(repr=False)
    endpoint_url: str


def get_rustfs_config(environ: Mapping[str, str] | None = None) -> RustFSConfig:
    """Load the connection settings for the RustFS endpoint.

    Values are taken as-is. An empty string counts as set; only variables
    absent from the environment are reported.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_ENV_VARS if name not in env]
    if missing:
        raise RuntimeError(
            f"Missing environment variable(s): {', '.join(missing)}. "
            "Set them to the RustFS connection settings before running the demo."
        )

    return RustFSConfig(
        region=env[REGION_ENV],
        access_key_id=env[ACCESS_KEY_ID_ENV],
        secret_access_key=env[SECRET_ACCESS_KEY_ENV],
        endpoint_url=env[ENDPOINT_URL_ENV],
    )
