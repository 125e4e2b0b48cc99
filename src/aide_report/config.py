from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "0") -> bool:
    value = os.getenv(name, default)
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: str) -> float:
    value = os.getenv(name, default)
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    search_url: str = field(
        default_factory=lambda: _env("AIDE_SEARCH_URL", "https://os.gcaaide.org/")
    )
    search_user: str = field(default_factory=lambda: _env("OPENSEARCH_USR"))
    search_password: str = field(default_factory=lambda: _env("OPENSEARCH_PWD"))
    search_indices: str = field(
        default_factory=lambda: _env(
            "AIDE_SEARCH_INDICES", "gca-honeyfarm-1-*,gca-honeyfarm-2-*"
        )
    )
    search_verify_certs: bool = field(
        default_factory=lambda: _env_bool("AIDE_SEARCH_VERIFY_CERTS", "1")
    )
    search_timeout_seconds: float = field(
        default_factory=lambda: _env_float("AIDE_SEARCH_TIMEOUT", "60")
    )
    search_time_zone: str = field(
        default_factory=lambda: _env("AIDE_SEARCH_TIME_ZONE", "Europe/London")
    )
    report_output_dir: str = field(
        default_factory=lambda: _env("AIDE_REPORT_OUTPUT_DIR", ".")
    )
    report_identity: str = field(
        default_factory=lambda: _env(
            "AIDE_REPORT_IDENTITY", _env("OPENSEARCH_USR")
        )
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def search_hosts_list(self) -> List[str]:
        return [host.strip() for host in self.search_url.split(",") if host.strip()]

    @property
    def search_indices_list(self) -> List[str]:
        return [
            index.strip()
            for index in self.search_indices.split(",")
            if index.strip()
        ]


def get_settings() -> Settings:
    return Settings()


def validate_settings(settings: Settings) -> None:
    if not settings.search_hosts_list:
        raise ValueError("AIDE_SEARCH_URL must name at least one host")
    if not settings.search_indices_list:
        raise ValueError("AIDE_SEARCH_INDICES must name at least one index pattern")
    if settings.search_timeout_seconds <= 0:
        raise ValueError("AIDE_SEARCH_TIMEOUT must be > 0")
    if not settings.report_output_dir.strip():
        raise ValueError("AIDE_REPORT_OUTPUT_DIR must not be empty")
    if not isinstance(logging.getLevelName(settings.log_level.strip().upper()), int):
        raise ValueError(f"LOG_LEVEL {settings.log_level!r} is not a logging level")
