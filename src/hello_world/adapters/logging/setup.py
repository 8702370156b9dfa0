"""Centralized logging initialization for all entry points.

The runtime receives every record (ring buffer, journald, eventlog, Graylog
as configured) but its console never writes: stdout carries only the
greeting and stderr stays empty, whatever the ``LOG_*`` variables request.

Contents:
    * :class:`LoggingConfigModel` – [lib_log_rich] section validation.
    * :class:`SilentConsole` – console port that drops rendered events.
    * :func:`init_logging` – idempotent initialization with fallback to defaults.
    * :func:`command_scope` – binds per-command context when the runtime is live.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator, Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hello_world import __init__conf__
from hello_world.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

#: Keys the console policy owns; user configuration may not set them.
_RESERVED_KEYS = frozenset({"console_adapter_factory", "console_stream", "console_stream_target"})


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through to lib_log_rich.RuntimeConfig once they are
    checked against its field names.

    Example:
        >>> model = LoggingConfigModel(service="myapp", environment="staging")
        >>> model.service
        'myapp'

        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


class SilentConsole:
    """Console port that accepts events and renders nothing."""

    def __init__(self, appearance: object) -> None:
        self.appearance = appearance

    def emit(self, event: object, *, colorize: bool) -> None:
        return None

    def flush(self) -> None:
        return None


def _runtime_config(parsed: LoggingConfigModel) -> lib_log_rich.runtime.RuntimeConfig:
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    unknown = sorted(set(extra_config) - set(lib_log_rich.runtime.RuntimeConfig.model_fields))
    if unknown:
        raise ConfigurationError(f"Unknown [lib_log_rich] keys: {', '.join(unknown)}")
    reserved = sorted(set(extra_config) & _RESERVED_KEYS)
    if reserved:
        raise ConfigurationError(f"[lib_log_rich] keys not configurable here: {', '.join(reserved)}")
    try:
        return lib_log_rich.runtime.RuntimeConfig(
            service=parsed.service or __init__conf__.name,
            environment=parsed.environment,
            console_adapter_factory=SilentConsole,
            **extra_config,
        )
    except (ValidationError, TypeError) as exc:
        raise ConfigurationError(f"Invalid [lib_log_rich] section: {exc}") from exc


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build RuntimeConfig from a Config object.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Runtime settings with the silent console injected.

    Raises:
        ConfigurationError: If the [lib_log_rich] section is not a table,
            names keys RuntimeConfig does not know, or fails validation.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    if not isinstance(log_raw, Mapping):
        raise ConfigurationError(f"[lib_log_rich] must be a table, got {type(log_raw).__name__}")
    try:
        parsed = LoggingConfigModel.model_validate(dict(log_raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [lib_log_rich] section: {exc}") from exc
    return _runtime_config(parsed)


@contextlib.contextmanager
def command_scope(job_id: str, **extra: object) -> Iterator[None]:
    """Bind logging context for one command run.

    Falls through without binding when the runtime is not initialised, which
    is the case under the in-memory adapter or when initialization failed.

    Args:
        job_id: Identifier attached to every record emitted inside the scope.
        **extra: Additional context fields.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra)):
        yield


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Safe to call repeatedly. An invalid [lib_log_rich] section falls back to
    the defaults; the rejection is logged once the runtime is up.

    Args:
        config: Layered configuration holding the [lib_log_rich] section.

    Raises:
        ConfigurationError: If lib_log_rich refuses even the defaults, which
            happens when ``LOG_*`` variables carry values it cannot parse.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    rejected: ConfigurationError | None = None
    try:
        runtime_config = _build_runtime_config(config)
    except ConfigurationError as exc:
        rejected = exc
        runtime_config = _runtime_config(LoggingConfigModel())
    try:
        lib_log_rich.runtime.init(runtime_config)
    except ValueError as exc:
        raise ConfigurationError(f"Logging runtime refused its settings: {exc}") from exc
    lib_log_rich.runtime.attach_std_logging()
    if rejected is not None:
        logger.warning("Using default logging settings: %s", rejected)


__all__ = [
    "LoggingConfigModel",
    "SilentConsole",
    "command_scope",
    "init_logging",
]
