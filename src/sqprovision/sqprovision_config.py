"""
Configuration parameters for the build wrapper provisioning step.
"""

import logging
import pathlib
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from sqprovision.sqprovision_exceptions import SqProvisionException

CONFIG_SECTION = "build_wrapper"


@dataclass
class ProvisionConfig:
    """
    Configuration for a single provisioning run.

    The capability id, resource name and output property key are contract
    strings shared with the server and are not configurable.
    """

    bin_directory: str
    output_directory: str
    log_level: int = logging.INFO

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ProvisionConfig":
        """
        Create a ProvisionConfig from a dictionary (loaded from TOML).

        Args:
            config_dict: Dictionary holding a [build_wrapper] table

        Returns:
            ProvisionConfig instance

        Raises:
            SqProvisionException: If the table or a required key is missing
        """
        section = config_dict.get(CONFIG_SECTION)
        if not isinstance(section, dict):
            raise SqProvisionException(f"Missing [{CONFIG_SECTION}] section")

        for key in ("bin_directory", "output_directory"):
            if not isinstance(section.get(key), str):
                raise SqProvisionException(
                    f"'{key}' in [{CONFIG_SECTION}] must be a string"
                )

        return cls(
            bin_directory=section["bin_directory"],
            output_directory=section["output_directory"],
            log_level=_parse_log_level(section.get("log_level")),
        )

    @classmethod
    def load_toml(cls, path: Union[str, pathlib.Path]) -> "ProvisionConfig":
        """
        Load the configuration from a TOML file.

        Raises:
            SqProvisionException: If the file cannot be parsed or is incomplete
        """
        with open(path, "rb") as f:
            try:
                toml_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise SqProvisionException(f"Invalid TOML in {path}: {e}") from e
        return cls.from_dict(toml_dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_log_level(value: Optional[Union[str, int]]) -> int:
    if value is None:
        return logging.INFO
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise SqProvisionException(f"log_level must be a level name or number, got {value!r}")
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise SqProvisionException(f"Unknown log level: {value}")
    return level
