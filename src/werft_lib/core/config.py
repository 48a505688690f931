# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for werft.

This module defines dataclasses representing all configurable aspects of the
werft client, including environment variables, connection settings, defaults
for job listing, presentation settings, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by werft."""

    # Enables werft debug mode.
    debug_mode: str = "WERFT_DEBUG"
    # Address of the werft service.
    host: str = "WERFT_HOST"
    # Explicit path to the werft config file.
    config: str = "WERFT_CONFIG"


@dataclass
class ConnectionSettings:
    """Settings for connecting to the werft service."""

    # Default address of the werft service.
    host: str = "localhost:7777"
    # Timeout for a single remote call in seconds.
    timeout: float = 30.0
    # Path of the list jobs procedure on the service.
    list_jobs_path: str = "/v1.WerftService/ListJobs"


@dataclass
class ListDefaults:
    """Default values used by `werft job list`."""

    # Maximal number of jobs returned by the service.
    limit: int = 50
    # Number of jobs to skip.
    offset: int = 0
    # Order expressions used when none are provided.
    order: list[str] = field(default_factory=lambda: ["name:desc"])


@dataclass
class JobListPresenterSettings:
    """Settings for JobListPresenter."""

    # Maximum displayed length of a job name before truncation.
    max_job_name_length: int = 60
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for table values.
    main_style: str = "default"
    # Style used for successful jobs.
    success_style: str = "bright_green"
    # Style used for failed jobs.
    failure_style: str = "bright_red"


@dataclass
class PhaseColors:
    """Color scheme for JobPhase display."""

    # Style used for jobs in an unknown phase.
    unknown: str = "grey70"
    # Style used for preparing jobs.
    preparing: str = "bright_magenta"
    # Style used for starting jobs.
    starting: str = "bright_cyan"
    # Style used for running jobs.
    running: str = "bright_blue"
    # Style used for finished jobs.
    done: str = "bright_green"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by werft.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of werft commands.
    default: int = 91
    # Returned when the remote service could not be reached or answered garbage.
    transport: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for werft."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    connection: ConnectionSettings = field(default_factory=ConnectionSettings)
    list_defaults: ListDefaults = field(default_factory=ListDefaults)
    job_list_presenter: JobListPresenterSettings = field(
        default_factory=JobListPresenterSettings
    )
    phase_colors: PhaseColors = field(default_factory=PhaseColors)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the werft binary.
    binary_name: str = "werft"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read werft config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("WERFT_CONFIG")) else None,
            # 2. Current working directory
            Path.cwd() / "werft_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "werft"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Nested tables become nested dataclasses, unknown keys are dropped.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        if field_info.name not in data:
            continue

        value = data[field_info.name]
        if is_dataclass(field_info.type) and isinstance(value, dict):
            value = _dict_to_dataclass(field_info.type, value)
        field_values[field_info.name] = value

    return cls(**field_values)


# Global configuration for werft.
CFG = Config.load()
