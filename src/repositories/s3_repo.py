"""S3 repository for knowledge base documents."""

import boto3


class S3Repository:
    """Minimal helper around S3 for reading JSON documents."""

    def __init__(self, bucket_name: str, client=None):
        self.bucket_name = bucket_name
        self.client = client or boto3.client("s3")

    def read_text(self, key: str) -> str:
        """Download an object and decode it as UTF-8."""
        resp = self.client.get_object(Bucket=self.bucket_name, Key=key)
        return resp["Body"].read().decode("utf-8")
