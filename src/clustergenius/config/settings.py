"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass

from ..utils.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_max_file_size_mb: int
    log_backup_count: int

    # LLM
    llm_model_name: str
    llm_sample_size: int
    llm_cluster_count: int
    llm_api_key_env: List[str]

    # Column inference
    identifier_keywords: List[str]
    amount_keywords: List[str]

    @classmethod
    def load(cls, config_path: Path = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            override = os.getenv("CLUSTERGENIUS_CONFIG")
            config_path = Path(override) if override else DEFAULT_CONFIG_PATH

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed configuration file {config_path}: {e}")

        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=config["app"]["version"],
                log_level=config["logging"]["level"],
                log_max_file_size_mb=config["logging"]["max_file_size_mb"],
                log_backup_count=config["logging"]["backup_count"],
                llm_model_name=config["llm"]["model_name"],
                llm_sample_size=config["llm"]["sample_size"],
                llm_cluster_count=config["llm"]["cluster_count"],
                llm_api_key_env=list(config["llm"]["api_key_env"]),
                identifier_keywords=list(config["columns"]["identifier_keywords"]),
                amount_keywords=list(config["columns"]["amount_keywords"])
            )
        except (KeyError, TypeError) as e:
            raise ConfigError(f"Invalid configuration file {config_path}: missing {e}")

    def api_key(self) -> Optional[str]:
        """Return the first non-empty API key from the configured env vars."""
        for name in self.llm_api_key_env:
            value = os.getenv(name)
            if value:
                return value
        return None
