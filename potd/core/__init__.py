"""Request resolution, generation, rendering, and output for potd."""

from __future__ import annotations


def resolve_request(**kwargs):
    from potd.core.resolver import resolve_request as _resolve_request

    return _resolve_request(**kwargs)


def run_request(request, adapter=None):
    from potd.core.potd_service import run_request as _run_request

    return _run_request(request, adapter)


__all__ = ["resolve_request", "run_request"]
