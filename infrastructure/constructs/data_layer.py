"""
Data layer construct: FAQ usage table + knowledge base override bucket.
"""

from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as dynamodb,
    aws_s3 as s3,
)
from constructs import Construct


class DataLayerConstruct(Construct):
    """Provision storage used by the FAQ Lambda."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
    ) -> None:
        super().__init__(scope, construct_id)

        removal_policy = RemovalPolicy.RETAIN if environment == "prod" else RemovalPolicy.DESTROY

        # DynamoDB table for FAQ usage events; items expire via TTL.
        self.usage_table = dynamodb.Table(
            self,
            "FaqUsage",
            partition_key=dynamodb.Attribute(
                name="event_type", type=dynamodb.AttributeType.STRING
            ),
            sort_key=dynamodb.Attribute(name="timestamp", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=environment == "prod",
            removal_policy=removal_policy,
            time_to_live_attribute="ttl",
        )

        # Optional knowledge base override document (knowledge_base.json).
        self.knowledge_bucket = s3.Bucket(
            self,
            "KnowledgeBase",
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            versioned=environment == "prod",
            removal_policy=removal_policy,
            auto_delete_objects=environment != "prod",
        )
