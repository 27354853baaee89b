"""
Tests for error types and the result handlers.
"""

import pytest
from pydantic import ValidationError

from parcel_tracker.app.core.exceptions import (
    AppException,
    MalformedInputError,
    OutOfRangeError,
    ParcelNotFoundError,
    QueueUnderflowError,
    UnderflowError,
    UndoUnderflowError,
    app_exception_handler,
    validation_exception_handler,
)
from parcel_tracker.app.schemas.parcel import ParcelCreate


def test_error_hierarchy():
    assert issubclass(MalformedInputError, AppException)
    assert issubclass(OutOfRangeError, AppException)
    assert issubclass(ParcelNotFoundError, AppException)
    assert issubclass(QueueUnderflowError, UnderflowError)
    assert issubclass(UndoUnderflowError, UnderflowError)


def test_app_exception_handler_builds_result():
    result = app_exception_handler(ParcelNotFoundError(12))
    
    assert result.ok is False
    assert result.error_code == "ERR_NOT_FOUND_001"
    assert result.message == "Parcel ID 12 not found in active records."
    assert result.details == {"resource": "Parcel", "id": 12}


def test_app_exception_handler_logs_warning(mocker):
    warning = mocker.patch("parcel_tracker.app.core.exceptions.logger.warning")
    
    app_exception_handler(QueueUnderflowError())
    
    warning.assert_called_once()
    assert warning.call_args.kwargs["extra"]["error_code"] == "ERR_UNDERFLOW_QUEUE"


def _validation_error(**overrides) -> ValidationError:
    values = {"id": 1, "sender": "a", "recipient": "b", "address": "c", "weight": 1.0, "priority": 1}
    values.update(overrides)
    with pytest.raises(ValidationError) as exc_info:
        ParcelCreate(**values)
    return exc_info.value


def test_validation_handler_maps_range_errors():
    exc = validation_exception_handler(_validation_error(priority=9))
    
    assert isinstance(exc, OutOfRangeError)
    assert exc.message == "Invalid priority. Must be between 1 and 5."


def test_validation_handler_maps_parse_errors():
    exc = validation_exception_handler(_validation_error(id="P-1"))
    
    assert isinstance(exc, MalformedInputError)
    assert exc.details == {"field": "id", "value": "P-1"}
