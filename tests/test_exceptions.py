"""
Tests for the exception hierarchy.
"""

from jp_prefecture.exceptions import (
    FileAccessError,
    InvalidPrefectureCode,
    InvalidPrefectureName,
    PrefectureError,
    create_file_error,
)


def test_invalid_name():
    error = InvalidPrefectureName("東京県")
    assert isinstance(error, PrefectureError)
    assert error.name == "東京県"
    assert str(error) == "Invalid prefecture name: 東京県"
    assert error.to_dict() == {
        'error_type': 'InvalidPrefectureName',
        'message': "Invalid prefecture name: 東京県",
        'error_code': 'INVALID_PREFECTURE_NAME',
        'context': {'name': "東京県"}
    }


def test_invalid_code():
    error = InvalidPrefectureCode(100)
    assert error.code == 100
    assert str(error) == "Invalid prefecture code: 100"
    assert error.error_code == 'INVALID_PREFECTURE_CODE'


def test_create_file_error():
    original = PermissionError("denied")
    error = create_file_error("read", "/data/input.csv", original)
    assert isinstance(error, FileAccessError)
    assert error.operation == "read"
    assert error.original_error is original
    assert error.context['original_error_type'] == 'PermissionError'
    assert "Failed to read file '/data/input.csv'" in str(error)
