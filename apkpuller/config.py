"""Configuration management for APK Puller."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

DEFAULT_CONFIG_PATH = Path.home() / ".config/apkpuller/config.yaml"


class PullerConfig(BaseModel):
    """Settings for talking to adb and writing pulled packages."""
    
    model_config = ConfigDict(validate_assignment=True)
    
    adb_path: str = Field(default="adb", description="Path to ADB binary")
    timeout: int = Field(default=30, gt=0, description="Timeout in seconds for adb queries")
    pull_timeout: int = Field(default=300, gt=0, description="Timeout in seconds for file transfers")
    output_dir: Path = Field(default=Path("."), description="Directory pulled APKs are written to")
    include_system: bool = Field(default=True, description="List system packages as well as user ones")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    
    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_config(config_path: Optional[Path] = None) -> PullerConfig:
    """Load configuration from file, or defaults when there is none.
    
    Raises:
        ValueError: If the file is not valid YAML, is not a mapping or
            holds invalid settings
    """
    
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    
    if not config_path.exists():
        return PullerConfig()
    
    yaml = YAML(typ="safe")
    try:
        with open(config_path, "r") as f:
            data = yaml.load(f) or {}
    except YAMLError as e:
        raise ValueError(f"{config_path} is not valid YAML: {e}") from e
    
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping of settings")
    
    return PullerConfig.model_validate(data)
