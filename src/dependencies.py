"""Global dependencies for the application."""

from typing import Any

from fastapi import Request

from src.operations.exceptions import MalformedBodyError


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_raw_fields(request: Request) -> Any:
    """Dependency decoding the request body into raw operation fields.

    JSON bodies are returned as decoded; form bodies become a flat mapping of
    strings. An empty body is treated as an empty object. Shape checks are
    left to the operation validator.

    Args:
        request: The FastAPI request object.

    Returns:
        The decoded body.

    Raises:
        MalformedBodyError: If the body is not valid JSON.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}
    try:
        return await request.json()
    except ValueError as exc:
        raise MalformedBodyError() from exc
