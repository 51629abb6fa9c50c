"""Lightweight boto3 helpers for talking to an S3-compatible endpoint."""

from __future__ import annotations

import boto3
from botocore.config import Config

from .config import RustFSConfig, get_rustfs_config

# S3-compatible servers expect SigV4 and bucket names in the path.
S3_CLIENT_CONFIG = Config(signature_version="s3v4", s3={"addressing_style": "path"})


def get_boto3_session(cfg: RustFSConfig | None = None) -> boto3.session.Session:
    """Create a boto3 session from the RustFS credentials."""
    cfg = cfg or get_rustfs_config()
    return boto3.session.Session(
        aws_access_key_id=cfg.access_key_id,
        aws_secret_access_key=cfg.secret_access_key,
        region_name=cfg.region,
    )


def get_s3_client(cfg: RustFSConfig | None = None):
    """Return an S3 client pointed at the configured endpoint."""
    cfg = cfg or get_rustfs_config()
    return get_boto3_session(cfg).client(
        "s3",
        endpoint_url=cfg.endpoint_url,
        config=S3_CLIENT_CONFIG,
    )
