"""Unit tests for S3FileStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from roadregistry.core.exceptions import StorageError
from roadregistry.persistence.record_store import RecordStore
from roadregistry.persistence.s3_backend import S3FileStore

BUCKET = "test-registry-datasets"


@pytest.fixture
def s3_backend():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield S3FileStore(bucket=BUCKET, region="us-east-1")


class TestWrite:
    def test_write_returns_path(self, s3_backend):
        result = s3_backend.write("registry/persons.txt", b"a,b,c")
        assert result == "registry/persons.txt"

    def test_write_overwrites(self, s3_backend):
        s3_backend.write("persons.txt", b"old")
        s3_backend.write("persons.txt", b"new")
        assert s3_backend.read("persons.txt") == b"new"


class TestRead:
    def test_read_returns_bytes(self, s3_backend):
        s3_backend.write("persons.txt", b"Hello")
        assert s3_backend.read("persons.txt") == b"Hello"

    def test_read_missing_key_raises(self, s3_backend):
        with pytest.raises(StorageError):
            s3_backend.read("does/not/exist.txt")


class TestExists:
    def test_missing_key(self, s3_backend):
        assert s3_backend.exists("persons.txt") is False

    def test_present_key(self, s3_backend):
        s3_backend.write("persons.txt", b"")
        assert s3_backend.exists("persons.txt") is True

    def test_missing_bucket_raises(self):
        with mock_aws():
            backend = S3FileStore(bucket="no-such-bucket", region="us-east-1")
            with pytest.raises(StorageError):
                backend.write("persons.txt", b"x")


class TestRecordStoreOnS3:
    def test_missing_dataset_reads_empty(self, s3_backend):
        store = RecordStore(s3_backend)
        assert store.read_people() == []
        assert store.read_offenses() == []
