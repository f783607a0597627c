"""Test utilities for asserting API responses and message codes."""

from typing import Any
from httpx import Response
from mailroom.api.core.messages import MessageCode
from mailroom.api.core.exceptions.base import MailroomException


def assert_success_response(
    response: Response,
    expected_message_code: MessageCode = MessageCode.SUCCESS,
    expected_status: int = 200,
) -> Any:
    """Assert that response is successful with expected message code.

    Returns:
        Response data for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()
    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )
    assert "message" in json_data, "Success response should have message"

    return json_data.get("data")


def assert_error_response(
    response: Response,
    expected_message_code: MessageCode,
    expected_status: int,
    expected_message: str | None = None,
) -> dict[str, Any]:
    """Assert that response is an error with expected message code."""
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()
    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )

    if expected_message:
        assert json_data.get("message") == expected_message, (
            f"Expected message '{expected_message}', "
            f"got '{json_data.get('message')}'"
        )

    return json_data


def assert_validation_error(response: Response) -> dict[str, Any]:
    """Assert that response is a request validation error."""
    return assert_error_response(response, MessageCode.INVALID_INPUT, 422)


def assert_mailroom_exception(
    exception: MailroomException,
    expected_message_code: MessageCode,
    expected_status: int | None = None,
) -> None:
    """Assert that a MailroomException has expected properties."""
    assert exception.message_code == expected_message_code, (
        f"Expected message_code {expected_message_code}, "
        f"got {exception.message_code}"
    )

    if expected_status:
        assert exception.status_code == expected_status, (
            f"Expected status_code {expected_status}, " f"got {exception.status_code}"
        )
