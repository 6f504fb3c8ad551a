"""Tests for the exception hierarchy and error responses."""

from neo_ingest.core.exceptions import NeoIngestError, create_error_response, get_http_status_code
from neo_ingest.assets.core.exceptions import ContentConflict, RecordConflict, VisibilityCycleDetected
from neo_ingest.assets.core.value_objects import AssetId, AssetName, ContainerId


def test_record_conflict_response():
    """Test the error response for a record conflict."""
    error = RecordConflict(
        message="Name taken",
        name=AssetName.parse("a.txt"),
        container_id=ContainerId("Uploads"),
        existing_id=AssetId(4),
    )

    response = create_error_response(error)

    assert get_http_status_code(error) == 409
    assert response["error"]["code"] == "RECORD_CONFLICT"
    assert response["error"]["retryable"] is True
    assert response["error"]["details"] == {"name": "a.txt", "container_id": "Uploads", "existing_id": 4}


def test_content_conflict_response():
    """Test the error response for an occupied content location."""
    error = ContentConflict(message="Location taken", location="Uploads/a.txt")

    response = create_error_response(error)

    assert get_http_status_code(error) == 409
    assert response["error"]["code"] == "CONTENT_CONFLICT"
    assert response["error"]["retryable"] is True
    assert response["error"]["details"] == {"location": "Uploads/a.txt"}


def test_fatal_errors_are_not_retryable():
    """Test that fatal ingestion errors are not retryable."""
    error = VisibilityCycleDetected(message="cycle", container_id=ContainerId("A"))

    assert isinstance(error, NeoIngestError)
    assert error.retryable is False
    assert get_http_status_code(error) == 500


def test_foreign_exceptions_map_to_500():
    """Test the status code of exceptions outside the hierarchy."""
    assert get_http_status_code(RuntimeError("boom")) == 500


def test_default_error_code_is_class_name():
    """Test the default error code."""
    assert NeoIngestError("x").error_code == "NeoIngestError"
