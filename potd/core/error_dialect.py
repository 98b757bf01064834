from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDetail:
    code: str
    message: str


class PotdError(ValueError):
    default_code = "invalid_request"

    def __init__(self, message: str, code: str | None = None) -> None:
        normalized = _normalize_code(code or self.default_code)
        clean_message = message.strip() or "unspecified error"
        self.code = normalized
        self.message = clean_message
        super().__init__(clean_message)

    def as_detail(self) -> ErrorDetail:
        return ErrorDetail(code=self.code, message=self.message)


class InvalidRequest(PotdError):
    default_code = "invalid_request"


class InvalidSeed(PotdError):
    default_code = "invalid_seed"


class InvalidDate(PotdError):
    default_code = "invalid_date"


class InvalidRange(PotdError):
    default_code = "invalid_range"


class GenerationError(PotdError):
    default_code = "generation_error"


class DateFormatError(PotdError):
    default_code = "date_format_error"


class SerializationError(PotdError):
    default_code = "serialization_error"


class SinkError(PotdError):
    default_code = "sink_error"

    def __init__(self, message: str, path: object = None) -> None:
        self.path = path
        super().__init__(message)


def _normalize_code(code: str) -> str:
    lowered = code.strip().lower()
    if not lowered:
        return "invalid_request"
    out = []
    for ch in lowered:
        if ch.isalnum() or ch == "_":
            out.append(ch)
        elif ch in ("-", " ", "."):
            out.append("_")
    normalized = "".join(out).strip("_")
    return normalized or "invalid_request"


def error_detail_from_exception(
    exc: BaseException,
    *,
    default_code: str = "invalid_request",
    default_message: str = "invalid request",
) -> ErrorDetail:
    if isinstance(exc, PotdError):
        return exc.as_detail()
    message = str(exc).strip() or default_message
    return ErrorDetail(code=_normalize_code(default_code), message=message)


def format_error_text(
    exc: BaseException,
    *,
    default_code: str = "invalid_request",
    default_message: str = "invalid request",
) -> str:
    detail = error_detail_from_exception(exc, default_code=default_code, default_message=default_message)
    return f"{detail.code}: {detail.message}"
