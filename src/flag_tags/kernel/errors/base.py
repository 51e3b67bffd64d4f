"""Root error class for the flag_tags error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Keyword arguments other than *code* are kept in :attr:`detail` and merged
    into :meth:`to_dict`, so a parse failure logs its ``raw`` text and
    ``position`` beside the code. Chain causes with ``raise ... from``.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        fields = "".join(f", {key}={value!r}" for key, value in self.detail.items())
        return f"{type(self).__name__}({self.message!r}, code={self.code!r}{fields})"

    def to_dict(self) -> dict[str, Any]:
        """Flat, log-friendly view: error type, code, message and detail fields."""
        payload: dict[str, Any] = {"error": type(self).__name__, "code": self.code, "message": self.message}
        payload.update(self.detail)
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
