"""Environment-backed configuration values.

Reads environment variables through schema views and caches the first
resolved value for each key, so configuration is read once per process::

    from wren import env
    from wren.schema import integer, not_blank, one_of, positive, string

    env.load_env_file()
    port = env.get_optional("SERVER_PORT", integer().must(positive).optional(8080))
    auth = env.get_required("AUTH_TYPE", string().must(one_of("oauth", "basic")), "oauth")
    token = env.get_critical("API_TOKEN", string().must(not_blank).critical())

Nothing happens at import time. ``load_env_file()`` loads a ``.env`` file
once; ``clear_cache()`` and ``reset()`` exist so tests can start from a
clean slate.
"""

import logging
import os
import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from wren.errors import CriticalValueError, SchemaError
from wren.schema.core import CriticalView, OptionalView, RequiredView

logger = logging.getLogger("wren.env")

_lock = threading.Lock()
_cache: dict[str, object] = {}
_env_loaded = False


def load_env_file(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Load variables from a ``.env`` file into ``os.environ``.

    Runs once per process; later calls return ``False`` until ``reset()``.
    With no *path*, the nearest ``.env`` from the working directory up is
    used. A missing file is logged, not raised. Existing variables win
    unless *override* is set.

    Returns ``True`` if a file was read.
    """
    global _env_loaded
    with _lock:
        if _env_loaded:
            return False
        _env_loaded = True

    dotenv_path = str(path) if path is not None else find_dotenv(usecwd=True)
    if not dotenv_path or not Path(dotenv_path).is_file():
        logger.info("No .env file loaded: %s not found", dotenv_path or ".env")
        return False

    load_dotenv(dotenv_path, override=override)
    logger.debug("Loaded environment from %s", dotenv_path)
    return True


def get_critical[T](key: str, view: CriticalView[T]) -> T:
    """Return the value of *key*, aborting startup if it is missing or invalid.

    Raises ``CriticalValueError``. Failures are not cached.
    """
    with _lock:
        if key in _cache:
            return _cache[key]  # type: ignore[return-value]

    try:
        value = view.parse(_read(key))
    except CriticalValueError as exc:
        exc.add_note(f"environment variable: {key}")
        raise
    return _store(key, value)


def get_required[T](key: str, view: RequiredView[T], fallback: T) -> T:
    """Return the value of *key*, or *fallback* logged as an error."""
    with _lock:
        if key in _cache:
            return _cache[key]  # type: ignore[return-value]

    try:
        value = view.parse(_read(key))
    except SchemaError as exc:
        logger.error(
            "Missing or invalid required environment variable %s, fallback %r applied: %s",
            key,
            fallback,
            exc,
        )
        value = fallback
    return _store(key, value)


def get_optional[T](key: str, view: OptionalView[T]) -> T:
    """Return the value of *key*, or the view's fallback logged at info."""
    with _lock:
        if key in _cache:
            return _cache[key]  # type: ignore[return-value]

    def log_fallback(fallback: T, error: SchemaError) -> None:
        logger.info(
            "Missing or invalid optional environment variable %s, fallback %r applied: %s",
            key,
            fallback,
            error,
        )

    value = view.on_fallback(log_fallback).parse(_read(key))
    return _store(key, value)


def clear_cache() -> None:
    """Forget every cached value so the next lookup reads the environment."""
    with _lock:
        _cache.clear()


def reset() -> None:
    """Clear the cache and allow ``load_env_file()`` to run again."""
    global _env_loaded
    with _lock:
        _cache.clear()
        _env_loaded = False


def _read(key: str) -> str:
    return os.environ.get(key, "")


def _store[T](key: str, value: T) -> T:
    # First writer wins if two threads resolve the same key
    with _lock:
        return _cache.setdefault(key, value)  # type: ignore[return-value]
