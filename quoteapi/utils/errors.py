from fastapi import HTTPException


class DatasetError(Exception):
    """Raised when the quote dataset can not be read or is not a valid quote list."""


def raise_method_not_allowed(headers: dict[str, str] | None = None) -> None:
    """
    Raise a 405 Method Not Allowed HTTPException.

    Args:
        headers: Response headers to keep on the error response.
    """
    raise HTTPException(status_code=405, detail="method_not_allowed", headers=headers)
