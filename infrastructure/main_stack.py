"""
Main CDK Stack for the FAQ resolution service.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class FaqResolverStack(Stack):
    """Main stack wiring all constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "faq-resolver")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("CostCenter", "website-chatbot")
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Data layer.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
        )

        # 2) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            usage_table_name=data_construct.usage_table.table_name,
            knowledge_bucket_name=(
                data_construct.knowledge_bucket.bucket_name
                if settings.kb_override_enabled
                else None
            ),
            analytics_enabled=settings.analytics_enabled,
            usage_ttl_days=settings.usage_ttl_days,
            log_level=settings.log_level,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        # Permissions for the API Lambda.
        data_construct.knowledge_bucket.grant_read(api_construct.main_lambda)
        data_construct.usage_table.grant_write_data(api_construct.main_lambda)

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "KnowledgeBaseBucket", value=data_construct.knowledge_bucket.bucket_name)
        CfnOutput(self, "UsageTable", value=data_construct.usage_table.table_name)
