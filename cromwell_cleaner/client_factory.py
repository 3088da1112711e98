"""
Storage client factory.

Builds the boto3 S3 client shared by listing and deletion. ``gs://`` locators
talk to the GCS XML interoperability endpoint using HMAC keys.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from botocore.config import Config
from dotenv import load_dotenv

from .config import DEFAULT_MAX_CONCURRENT_DELETES, LISTING_CONNECTIONS, MAX_REQUEST_ATTEMPTS, endpoint_for_scheme


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for storage credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> tuple[str, str] | None:
    """
    Load access keys from a .env file.

    Returns:
        tuple: (access_key_id, secret_access_key), or None when the file does not
        define them and boto3's default credential chain should be used instead.
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
    if access_key_id and secret_access_key:
        logging.debug("Storage credentials loaded from %s", resolved_path)
        return access_key_id, secret_access_key

    logging.debug("No credentials in %s; using the default credential chain", resolved_path)
    return None


def create_storage_client(
    scheme: str,
    endpoint_url: Optional[str] = None,
    max_pool_connections: int = DEFAULT_MAX_CONCURRENT_DELETES + LISTING_CONNECTIONS,
    env_path: Optional[str] = None,
):
    """
    Create the S3-compatible client for a locator scheme.

    Args:
        scheme: Locator scheme ('gs' or 's3')
        endpoint_url: Optional endpoint override
        max_pool_connections: HTTP connection pool size: delete concurrency plus the listing thread
        env_path: Optional .env path for credentials

    Returns:
        boto3.client: Configured S3 client, safe to share across threads
    """
    client_kwargs = {
        "config": Config(
            max_pool_connections=max_pool_connections,
            retries={"max_attempts": MAX_REQUEST_ATTEMPTS, "mode": "standard"},
        ),
    }
    resolved_endpoint = endpoint_for_scheme(scheme, endpoint_url)
    if resolved_endpoint is not None:
        client_kwargs["endpoint_url"] = resolved_endpoint

    credentials = load_credentials_from_env(env_path)
    if credentials is not None:
        client_kwargs["aws_access_key_id"], client_kwargs["aws_secret_access_key"] = credentials
        session_token = os.getenv("AWS_SESSION_TOKEN")
        if session_token:
            client_kwargs["aws_session_token"] = session_token

    return boto3.client("s3", **client_kwargs)
