import os
from collections.abc import Iterator

import boto3
import pytest
from moto import mock_aws

# Ensure AWS SDK has a region and fake credentials for moto
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")

# Environment variables read by common.config
os.environ.setdefault("DEVICE_TYPE", "awair-element")
os.environ.setdefault("DEVICE_ID", "1234")
os.environ.setdefault("AWAIR_API_KEY", "TEST_API_KEY")
os.environ.setdefault("BUCKET", "airdata-test-bucket")


@pytest.fixture(scope="session", autouse=True)
def aws_moto() -> Iterator[None]:
    with mock_aws():
        s3 = boto3.client("s3")
        s3.create_bucket(Bucket=os.environ["BUCKET"])
        yield


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    from common.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
