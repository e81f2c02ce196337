"""
Google Cloud Storage client for resume files.

Authenticates once from a service-account credential file and writes
publicly readable objects. Each upload is a single attempt bounded by an
overall deadline; failures are logged and raised so the caller decides what
to do with them.
"""

import os
import time
import logging
from typing import BinaryIO, Callable, Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

logger = logging.getLogger(__name__)

CREDENTIALS_ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"
PUBLIC_URL_TEMPLATE = "https://storage.googleapis.com/{bucket}/{name}"
PUBLIC_READ_ACL = "publicRead"
DEFAULT_UPLOAD_TIMEOUT = 5.0
# Bytes read from the source stream between deadline checks
COPY_CHUNK_SIZE = 256 * 1024


class ObjectStoreError(Exception):
    """Base error for object storage failures."""


class ObjectStoreInitError(ObjectStoreError):
    """Credential resolution or client construction failed."""


class ObjectStoreUploadError(ObjectStoreError):
    """Writing an object to the bucket failed."""


class ObjectStoreTimeoutError(ObjectStoreUploadError):
    """The upload did not finish before its deadline."""


def public_url(bucket: str, name: str) -> str:
    return PUBLIC_URL_TEMPLATE.format(bucket=bucket, name=name)


class ObjectStoreClient:
    """Thin wrapper around `google.cloud.storage.Client`."""

    def __init__(
        self,
        client,
        upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.upload_timeout = upload_timeout
        self._clock = clock

    @classmethod
    def from_credentials_file(
        cls,
        filename: str,
        directory: Optional[str] = None,
        upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT,
    ) -> "ObjectStoreClient":
        """
        Build an authenticated client from a credential file.

        Args:
            filename: Service-account JSON file name
            directory: Directory holding the file (defaults to the working directory)
            upload_timeout: Seconds allowed for each object write

        Returns:
            ObjectStoreClient: Ready-to-use client

        Raises:
            ObjectStoreInitError: If the file is missing or the client cannot be built
        """
        try:
            base_dir = directory or os.getcwd()
        except OSError as e:
            raise ObjectStoreInitError(f"Cannot resolve working directory: {e}") from e

        cred_path = os.path.join(base_dir, filename)
        if not os.path.isfile(cred_path):
            raise ObjectStoreInitError(f"Credential file not found: {cred_path}")

        # Process-wide; google-auth reads it when the client is constructed
        os.environ[CREDENTIALS_ENV_VAR] = cred_path

        try:
            client = storage.Client()
        except (GoogleAuthError, ValueError, OSError) as e:
            raise ObjectStoreInitError(f"Failed to create storage client: {e}") from e

        logger.info(f"Storage client initialized with credentials from {cred_path}")
        return cls(client, upload_timeout=upload_timeout)

    def upload_object(
        self,
        bucket: str,
        name: str,
        stream: BinaryIO,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Stream bytes into `bucket/name` with a public-read ACL.

        The copy is checked against a deadline of `upload_timeout` seconds
        between chunks and before the upload is finalized; every request to
        the service is also capped by the same timeout. An expired deadline
        cancels the resumable upload.

        Args:
            bucket: Bucket name
            name: Object name
            stream: Readable binary stream
            content_type: Optional MIME type for the object

        Returns:
            str: Public URL of the uploaded object

        Raises:
            ObjectStoreTimeoutError: If the deadline passes before the write completes
            ObjectStoreUploadError: If the write fails
        """
        blob = self.client.bucket(bucket).blob(name)
        deadline = self._clock() + self.upload_timeout
        try:
            with blob.open(
                "wb",
                content_type=content_type,
                predefined_acl=PUBLIC_READ_ACL,
                timeout=self.upload_timeout,
                retry=None,
            ) as writer:
                while True:
                    self._check_deadline(deadline, bucket, name)
                    chunk = stream.read(COPY_CHUNK_SIZE)
                    if not chunk:
                        break
                    writer.write(chunk)
                self._check_deadline(deadline, bucket, name)
        except ObjectStoreTimeoutError as e:
            logger.error(f"Failed to upload gs://{bucket}/{name}: {str(e)}")
            raise
        except (GoogleAPIError, GoogleAuthError, OSError, ValueError) as e:
            logger.error(f"Failed to upload gs://{bucket}/{name}: {str(e)}")
            raise ObjectStoreUploadError(
                f"Failed to upload {name} to bucket {bucket}: {str(e)}"
            ) from e

        logger.info(f"Uploaded object gs://{bucket}/{name}")
        return public_url(bucket, name)

    def _check_deadline(self, deadline: float, bucket: str, name: str) -> None:
        if self._clock() >= deadline:
            raise ObjectStoreTimeoutError(
                f"Upload of {name} to bucket {bucket} exceeded "
                f"{self.upload_timeout:g}s deadline"
            )
