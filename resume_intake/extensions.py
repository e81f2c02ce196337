"""
Per-application service wiring.

The storage client and the MongoDB collection are created once by the
application factory and kept on `app.extensions`, so every request of an app
shares them and tests can inject their own.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import Flask, current_app

from resume_intake.config import AppConfig
from resume_intake.services.object_store import ObjectStoreClient
from resume_intake.services.resume_management import (
    ResumePipeline,
    ResumeRepository,
    ResumeStorageService,
)

logger = logging.getLogger(__name__)

EXTENSION_KEY = "resume_intake"


@dataclass
class IntakeServices:
    repository: ResumeRepository
    storage_service: ResumeStorageService
    pipeline: ResumePipeline


def init_services(
    app: Flask,
    config: AppConfig,
    object_store: Optional[ObjectStoreClient] = None,
    repository: Optional[ResumeRepository] = None,
) -> IntakeServices:
    """Build the services for `app`, creating real clients for anything not given.

    Raises:
        ObjectStoreInitError: If the storage client cannot be initialized
    """
    if object_store is None:
        object_store = ObjectStoreClient.from_credentials_file(
            config.storage.credentials_file,
            directory=config.storage.credentials_dir,
            upload_timeout=config.storage.upload_timeout,
        )
    if repository is None:
        repository = ResumeRepository.from_uri(
            config.mongo.uri, config.mongo.database, config.mongo.collection
        )

    storage_service = ResumeStorageService(object_store, config.storage.bucket)
    services = IntakeServices(
        repository=repository,
        storage_service=storage_service,
        pipeline=ResumePipeline(storage_service, repository),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> IntakeServices:
    """Services of the current app."""
    return current_app.extensions[EXTENSION_KEY]
