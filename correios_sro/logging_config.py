"""
logging_config.py
------------------

Shared logging utilities for structured logging throughout the
Correios SRO client.  It uses Python's built‑in ``logging`` module so
that log output can be captured by whatever handlers the host
application installs.  Messages are serialised as JSON to make them
easier to parse downstream.

Being a library, the package does not touch the root logger on
import.  A ``NullHandler`` is attached to the package logger and
:func:`configure_logging` can be called by scripts that want the
classic stdout output.

To use this module, import ``logger`` and call its methods instead
of ``logging.info`` directly.  The ``log_call`` decorator can be
applied to functions to record entry and exit points at the DEBUG
level without leaking sensitive information such as the SRO password.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

# Keys containing any of these fragments never reach the logs.
SENSITIVE_KEYWORDS = ("senha", "password", "token", "secret")

logger = logging.getLogger("correios_sro")
logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    The format matches ``%(asctime)s %(levelname)s %(message)s``.  Calling
    this more than once only adjusts the level.
    """
    if not any(getattr(h, "_correios_sro", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        handler._correios_sro = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys containing 'senha', 'password', 'token' or
    'secret' removed.  Lists and tuples are processed element‑wise.
    Byte strings are replaced by their length so that request bodies
    (which embed the credentials) are never written out.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in SENSITIVE_KEYWORDS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    # Pydantic models expose their fields through ``model_dump``.
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump(mode="json"))
        except Exception:
            return str(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    This decorator logs a DEBUG level message before a function is executed
    and another after it returns.  The messages include the function name
    and a sanitised snapshot of the arguments and return value.  Failures
    of the wrapped callable are not caught here; they propagate unchanged.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__name__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__name__,
                "result": _sanitize(result),
            }))
        return result

    wrapper.__signature__ = inspect.signature(func)  # type: ignore[attr-defined]
    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     body_size: int | None = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Only high‑level information (method, URL, headers, body size, status
    and duration) is recorded.  The SOAP body itself carries the SRO
    password and is therefore never logged.

    Parameters
    ----------
    method : str
        The HTTP method (always POST for SRO).
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    body_size : int, optional
        Size of the request body in bytes.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = _sanitize(dict(headers))
    if body_size is not None:
        data["body_size"] = body_size
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
