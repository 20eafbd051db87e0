"""
Server Configuration

Loads configuration from environment variables and provides defaults.
A .env file at the project root is loaded with python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from discovery.models.config import DEFAULT_CONFIG, RankingConfig

BASE_DIR = Path(__file__).resolve().parent.parent

root_env = BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("memory", "json", "firebase")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "memory" (empty store, tests/local) | "json" | "firebase"
    data_source: str = "memory"
    # When data_source=json: file of worker documents
    workers_json_path: Optional[Path] = None
    # When data_source=firebase: service account JSON and optional project id
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None
    workers_collection: str = "users"

    # Optional JSON file with ranking overrides (see RankingConfig.from_dict)
    ranking_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or "memory"
        if data_source not in DATA_SOURCES:
            data_source = "memory"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            workers_json_path=_path_env("WORKERS_JSON_PATH", BASE_DIR / "data" / "workers.json"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            workers_collection=os.getenv("WORKERS_COLLECTION", "users"),
            ranking_config_path=_path_env("RANKING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        if self.data_source == "json" and (not self.workers_json_path or not self.workers_json_path.exists()):
            errors.append(f"Workers JSON not found: {self.workers_json_path}")
        if self.data_source == "firebase":
            if not self.firebase_credentials_path or not self.firebase_credentials_path.is_file():
                errors.append(f"Firebase credentials not found: {self.firebase_credentials_path}")
        if self.ranking_config_path and not self.ranking_config_path.exists():
            errors.append(f"Ranking config not found: {self.ranking_config_path}")
        return len(errors) == 0, errors

    def load_ranking_config(self) -> RankingConfig:
        """RankingConfig from ranking_config_path, or defaults."""
        if not self.ranking_config_path:
            return DEFAULT_CONFIG
        with open(self.ranking_config_path) as f:
            return RankingConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
