from typing import Any

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from .config import DEFAULT_KEY_PREFIX, Settings
from .errors import PublishError

logger = Logger()


def get_s3() -> Any:
    """Return the S3 client used by ``S3Publisher``."""
    return boto3.client("s3")


class S3Publisher:
    def __init__(self, s3: Any, bucket: str, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self.s3 = s3
        self.bucket = bucket
        self.key_prefix = key_prefix

    @classmethod
    def from_settings(cls, settings: Settings, s3: Any | None = None) -> "S3Publisher":
        return cls(s3 if s3 is not None else get_s3(), bucket=settings.bucket, key_prefix=settings.key_prefix)

    def object_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}.csv"

    def put(self, key: str, payload: bytes) -> str:
        """Store ``payload`` as a single object and return its ``s3://`` location."""
        object_key = self.object_key(key)
        try:
            self.s3.put_object(
                Bucket=self.bucket,
                Key=object_key,
                Body=payload,
                ContentType="text/csv",
            )
        except (ClientError, BotoCoreError) as exc:
            raise PublishError(f"Failed to upload s3://{self.bucket}/{object_key}: {exc}") from exc
        location = f"s3://{self.bucket}/{object_key}"
        logger.info("airdata_uploaded", location=location, size=len(payload))
        return location
