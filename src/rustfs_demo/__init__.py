"""Bucket and object walkthrough against a RustFS (S3-compatible) endpoint."""

from __future__ import annotations

from .aws import get_s3_client
from .config import RustFSConfig, get_rustfs_config

__all__ = ["RustFSConfig", "get_rustfs_config", "get_s3_client"]
