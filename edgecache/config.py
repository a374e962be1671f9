"""Cache application configuration loaded from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping, Optional, TypeVar

ENV_PROD = "prod"
ENV_DEV = "dev"
ENV_TEST = "test"

PTR_BYTES_WEIGHT = 8
"""Size in bytes accounted for a single pointer when estimating memory use."""

_T = TypeVar("_T")

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_UNIT_CHARS = "nsuµμmh"

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


class ConfigError(ValueError):
    """Raised when an environment value cannot be converted to its field type."""


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h30m"`` or ``"250ms"``.

    A bare number is taken as nanoseconds.
    """
    raw = text.strip()
    if not raw:
        return timedelta(0)
    if not any(ch in raw for ch in _UNIT_CHARS):
        raw += "ns"
    sign = 1
    if raw[0] in "+-":
        sign = -1 if raw[0] == "-" else 1
        raw = raw[1:]
    if not raw:
        raise ConfigError(f"invalid duration {text!r}")
    total_ns = Decimal(0)
    pos = 0
    while pos < len(raw):
        match = _DURATION_PART.match(raw, pos)
        if match is None:
            raise ConfigError(f"invalid duration {text!r}")
        try:
            total_ns += Decimal(match.group(1)) * _NS_PER_UNIT[match.group(2)]
        except InvalidOperation as exc:
            raise ConfigError(f"invalid duration {text!r}") from exc
        pos = match.end()
    return timedelta(microseconds=sign * int(total_ns // 1000))


def parse_bool(text: str) -> bool:
    """Parse a boolean using the accepted spellings of true and false."""
    value = text.strip()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ConfigError(f"invalid boolean {text!r}")


def _parse_int(text: str) -> int:
    value = text.strip()
    try:
        return int(value, 0)
    except ValueError:
        try:
            return int(value, 10)
        except ValueError as exc:
            raise ConfigError(f"invalid integer {text!r}") from exc


def _parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError as exc:
        raise ConfigError(f"invalid number {text!r}") from exc


def _parse_uint(text: str) -> int:
    value = _parse_int(text)
    if value < 0:
        raise ConfigError(f"invalid unsigned integer {text!r}")
    return value


@dataclass
class CacheConfig:
    """Settings of the cache service."""

    app_env: str = ""
    app_debug: bool = False
    backend_url: str = ""
    revalidate_beta: float = 0.0
    revalidate_interval: timedelta = field(default_factory=timedelta)
    init_storage_len_per_shard: int = 0
    eviction_algo: str = ""
    memory_fill_threshold: float = 0.0
    memory_limit: int = 0
    liveness_probe_timeout: timedelta = field(default_factory=timedelta)
    refresh_duration_threshold: timedelta = field(default_factory=timedelta)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "CacheConfig":
        """Build a configuration from environment variables.

        Unset or empty variables keep their zero value. The refresh threshold
        is derived as the revalidation interval scaled by the beta factor.
        """
        source = os.environ if env is None else env

        def read(name: str, convert: Callable[[str], _T], default: _T) -> _T:
            raw = source.get(name)
            if raw is None or raw == "":
                return default
            try:
                return convert(raw)
            except ConfigError as exc:
                raise ConfigError(f"{name}: {exc}") from exc

        cfg = cls(
            app_env=read("APP_ENV", str, ""),
            app_debug=read("APP_DEBUG", parse_bool, False),
            backend_url=read("BACKEND_URL", str, ""),
            revalidate_beta=read("REVALIDATE_BETA", _parse_float, 0.0),
            revalidate_interval=read("REVALIDATE_INTERVAL", parse_duration, timedelta(0)),
            init_storage_len_per_shard=read("INIT_STORAGE_LEN_PER_SHARD", _parse_int, 0),
            eviction_algo=read("EVICTION_ALGO", str, ""),
            memory_fill_threshold=read("MEMORY_FILL_THRESHOLD", _parse_float, 0.0),
            memory_limit=read("MEMORY_LIMIT", _parse_uint, 0),
            liveness_probe_timeout=read(
                "LIVENESS_PROBE_FAILED_TIMEOUT", parse_duration, timedelta(0)
            ),
        )
        cfg.refresh_duration_threshold = cfg.revalidate_interval * cfg.revalidate_beta
        return cfg

    def is_prod_env(self) -> bool:
        """True when running in production mode."""
        return self.app_env == ENV_PROD

    def is_dev_env(self) -> bool:
        """True when running in development mode."""
        return self.app_env == ENV_DEV

    def is_test_env(self) -> bool:
        """True when running in test mode."""
        return self.app_env == ENV_TEST

    def is_debug_on(self) -> bool:
        """True when debug mode is enabled."""
        return self.app_debug