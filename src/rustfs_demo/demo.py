"""Create, delete and list buckets and objects on a RustFS endpoint."""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError

from .aws import get_s3_client
from .config import RustFSConfig, get_rustfs_config

CREATE_BUCKET_NAME = "rust-sdk-1"
DELETE_BUCKET_NAME = "cn-east-1rust-sdk"
LIST_OBJECTS_BUCKET_NAME = "rust-sdk-1"


def print_config(cfg: RustFSConfig) -> None:
    print("Config loaded:")
    print(f"  Region: {cfg.region}")
    print(f"  Endpoint: {cfg.endpoint_url}")


def create_bucket(client, bucket: str) -> None:
    try:
        client.create_bucket(Bucket=bucket)
    except (ClientError, BotoCoreError) as exc:
        print(f"Error creating bucket: {exc}")
        raise RuntimeError(f"Failed to create bucket {bucket!r}: {exc}") from exc
    print("Bucket created successfully")


def delete_bucket(client, bucket: str) -> None:
    try:
        client.delete_bucket(Bucket=bucket)
    except (ClientError, BotoCoreError) as exc:
        print(f"Error deleting bucket: {exc}")
        raise RuntimeError(f"Failed to delete bucket {bucket!r}: {exc}") from exc
    print("Bucket deleted successfully")


def list_buckets(client) -> list[str]:
    """Print and return the names of every bucket visible to the credentials."""
    try:
        response = client.list_buckets()
    except (ClientError, BotoCoreError) as exc:
        print(f"Error listing buckets: {exc}")
        raise RuntimeError(f"Failed to list buckets: {exc}") from exc

    names = [bucket["Name"] for bucket in response.get("Buckets", [])]
    print(f"Total buckets number is {len(names)}")
    for name in names:
        print(f"Bucket: {name}")
    return names


def list_objects(client, bucket: str) -> list[str]:
    """Print and return every object key in `bucket`."""
    paginator = client.get_paginator("list_objects_v2")

    keys: list[str] = []
    try:
        for page in paginator.paginate(Bucket=bucket):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
    except (ClientError, BotoCoreError) as exc:
        print(f"Error listing objects: {exc}")
        raise RuntimeError(f"Failed to list objects in {bucket!r}: {exc}") from exc

    print(f"Total objects number is {len(keys)}")
    for key in keys:
        print(f"Object: {key}")
    return keys


def run_demo(client) -> None:
    """Run the walkthrough in order; the first failure stops the rest."""
    create_bucket(client, CREATE_BUCKET_NAME)
    delete_bucket(client, DELETE_BUCKET_NAME)
    list_buckets(client)
    list_objects(client, LIST_OBJECTS_BUCKET_NAME)


def main() -> None:
    cfg = get_rustfs_config()
    print_config(cfg)

    try:
        client = get_s3_client(cfg)
    except (ValueError, BotoCoreError) as exc:
        print(f"Error creating client: {exc}")
        raise RuntimeError(f"Failed to create S3 client for {cfg.endpoint_url!r}: {exc}") from exc

    run_demo(client)


if __name__ == "__main__":
    main()
