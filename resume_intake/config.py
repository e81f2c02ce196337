"""
Resume Intake Configuration

Centralized configuration for object storage, MongoDB and the web layer with
environment variable support. Values are read when the config objects are
built, so a `.env` loaded by the application factory is honoured.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_CREDENTIALS_FILE = "auburn-hacks-gcs.json"


class ConfigError(Exception):
    """Raised when configuration values are missing or invalid."""


def _env(name: str, default: Optional[str] = None):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class StorageConfig:
    """Google Cloud Storage settings."""

    bucket: str = _env("GCS_BUCKET", "")
    credentials_file: str = _env("GCS_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE)
    # Defaults to the process working directory when unset
    credentials_dir: Optional[str] = _env("GCS_CREDENTIALS_DIR")
    upload_timeout: float = field(
        default_factory=lambda: float(os.getenv("GCS_UPLOAD_TIMEOUT", "5"))
    )


@dataclass
class MongoConfig:
    """MongoDB connection settings."""

    uri: str = _env("MONGO_URI", "mongodb://localhost:27017")
    database: str = _env("MONGO_DATABASE", "resume_intake")
    collection: str = _env("MONGO_COLLECTION", "resumes")


@dataclass
class AppConfig:
    """Complete service configuration."""

    storage: StorageConfig = None
    mongo: MongoConfig = None
    cors_origins: List[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
            ).split(",")
            if origin.strip()
        ]
    )
    log_path: str = _env("RESUME_INTAKE_LOG", "resume_intake.log")
    secret_key: str = _env("SECRET_KEY", "dev-secret-key")

    def __post_init__(self):
        if self.storage is None:
            self.storage = StorageConfig()
        if self.mongo is None:
            self.mongo = MongoConfig()

    def validate(self) -> "AppConfig":
        """Check the values the service cannot run without."""
        if not (self.storage.bucket or "").strip():
            raise ConfigError("GCS_BUCKET must be set to a non-empty bucket name")
        if self.storage.upload_timeout <= 0:
            raise ConfigError("GCS_UPLOAD_TIMEOUT must be positive")
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary for logging (no secrets)."""
        return {
            "storage": {
                "bucket": self.storage.bucket,
                "credentials_file": self.storage.credentials_file,
                "credentials_dir": self.storage.credentials_dir,
                "upload_timeout": self.storage.upload_timeout,
            },
            "mongo": {
                "database": self.mongo.database,
                "collection": self.mongo.collection,
            },
            "cors_origins": list(self.cors_origins),
            "log_path": self.log_path,
        }
