"""Root of the product_filter error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Error carrying a machine-readable ``code`` and a ``detail`` mapping.

    Chain the triggering exception with ``raise ... from exc``; it is then
    reported under ``"cause"`` by :meth:`to_dict`.
    """

    default_code: ClassVar[str] = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["BaseError"]
