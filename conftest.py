"""Pytest configuration and shared fixtures for the Cromwell artifact cleaner."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from cromwell_cleaner.listing import ObjectRef
from cromwell_cleaner.locator import StorageLocator

ARTIFACT_UUID = "b189154b-fd26-4ed1-a6f0-4f6191f1e820"


@pytest.fixture(autouse=True)
def mock_aws_env_file(tmp_path, monkeypatch):
    """Auto-use fixture that provides a mock .env file with storage HMAC keys.

    Sets AWS_ENV_FILE to point at it so no test ever reads the developer's ~/.env.
    """
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_ACCESS_KEY_ID=test_key\nAWS_SECRET_ACCESS_KEY=test_secret\n")
    monkeypatch.setenv("AWS_ENV_FILE", str(env_file))
    yield str(env_file)


@pytest.fixture(name="mock_s3")
def fixture_mock_s3():
    """Provide a MagicMock standing in for the boto3 S3 client."""
    s3 = mock.MagicMock()
    s3.head_bucket.return_value = {}
    s3.delete_object.return_value = {}
    return s3


@pytest.fixture(name="locator")
def fixture_locator():
    """Locator for gs://my-bucket/my_folder/."""
    return StorageLocator(scheme="gs", bucket="my-bucket", prefix="my_folder/")


@pytest.fixture(name="artifact_key")
def fixture_artifact_key():
    """Return a factory building artifact keys under my_folder/."""

    def _build(leaf: str = "script", call: str = "foobar", shard: int = 42) -> str:
        return f"my_folder/{ARTIFACT_UUID}/call-{call}/shard-{shard}/{leaf}"

    return _build


@pytest.fixture(name="make_ref")
def fixture_make_ref():
    """Return a factory building ObjectRefs in my-bucket."""

    def _build(name: str) -> ObjectRef:
        return ObjectRef(bucket="my-bucket", name=name)

    return _build
