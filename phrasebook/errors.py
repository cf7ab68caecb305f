from __future__ import annotations


class PhrasebookError(Exception):
    """Base error; carries the HTTP status the web layer should answer with."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(PhrasebookError):
    status_code = 400


class NotFound(PhrasebookError):
    status_code = 404


class InternalError(PhrasebookError):
    status_code = 500
