"""Tests for cromwell_cleaner/deletion.py."""

from __future__ import annotations

import logging

from botocore.exceptions import ClientError

from cromwell_cleaner.deletion import BatchResult, DeletionExecutor
from cromwell_cleaner.errors import DeleteFailed
from tests.assertions import assert_equal, deleted_keys


def _not_found(key):
    return ClientError({"Error": {"Code": "NoSuchKey", "Message": f"{key} missing"}}, "DeleteObject")


def test_delete_batch_deletes_every_object(mock_s3, make_ref):
    """Test each object gets exactly one delete request."""
    refs = [make_ref(f"my_folder/obj-{idx}") for idx in range(25)]

    with DeletionExecutor(mock_s3, max_workers=4) as executor:
        result = executor.delete_batch(refs)

    assert_equal(result, BatchResult(attempted=25, failed=0))
    assert_equal(result.deleted, 25)
    assert_equal(deleted_keys(mock_s3), sorted(ref.name for ref in refs))
    mock_s3.delete_object.assert_any_call(Bucket="my-bucket", Key="my_folder/obj-0")


def test_failure_does_not_stop_siblings(mock_s3, make_ref, caplog):
    """Test one failing delete does not prevent the others."""
    refs = [make_ref("my_folder/a"), make_ref("my_folder/b"), make_ref("my_folder/c")]

    def _delete(Bucket, Key):  # pylint: disable=invalid-name
        if Key == "my_folder/b":
            raise _not_found(Key)
        return {}

    mock_s3.delete_object.side_effect = _delete

    with caplog.at_level(logging.ERROR):
        with DeletionExecutor(mock_s3, max_workers=2) as executor:
            result = executor.delete_batch(refs)

    assert_equal(result, BatchResult(attempted=3, failed=1))
    assert_equal(deleted_keys(mock_s3), ["my_folder/a", "my_folder/b", "my_folder/c"])
    assert "my-bucket/my_folder/b" in caplog.text


def test_all_failures_are_reported_not_raised(mock_s3, make_ref):
    """Test the batch never raises even when every delete fails."""
    mock_s3.delete_object.side_effect = _not_found("x")
    refs = [make_ref(f"my_folder/{idx}") for idx in range(5)]

    with DeletionExecutor(mock_s3, max_workers=3) as executor:
        result = executor.delete_batch(refs)

    assert_equal(result.failed, 5)
    assert_equal(result.deleted, 0)


def test_delete_object_outcome_carries_error(mock_s3, make_ref):
    """Test a failed outcome records a DeleteFailed with the object identity."""
    mock_s3.delete_object.side_effect = _not_found("my_folder/a")
    ref = make_ref("my_folder/a")

    with DeletionExecutor(mock_s3, max_workers=1) as executor:
        outcome = executor.delete_object(ref)

    assert not outcome.ok
    assert isinstance(outcome.error, DeleteFailed)
    assert_equal(outcome.error.key, "my_folder/a")
    assert_equal(outcome.error.bucket, "my-bucket")
    assert_equal(outcome.object, ref)


def test_empty_batch_issues_no_requests(mock_s3):
    """Test an empty batch is a no-op."""
    with DeletionExecutor(mock_s3) as executor:
        result = executor.delete_batch([])

    assert_equal(result, BatchResult())
    mock_s3.delete_object.assert_not_called()


def test_unexpected_error_is_counted_not_raised(mock_s3, make_ref, caplog):
    """Test non-botocore failures stay confined to their object."""
    refs = [make_ref("my_folder/a"), make_ref("my_folder/b")]

    def _delete(Bucket, Key):  # pylint: disable=invalid-name
        if Key == "my_folder/a":
            raise KeyError("Error")
        return {}

    mock_s3.delete_object.side_effect = _delete

    with caplog.at_level(logging.ERROR):
        with DeletionExecutor(mock_s3, max_workers=2) as executor:
            result = executor.delete_batch(refs)

    assert_equal(result, BatchResult(attempted=2, failed=1))
    assert "my-bucket/my_folder/a" in caplog.text
