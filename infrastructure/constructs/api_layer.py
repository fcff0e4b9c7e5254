"""
API layer construct: shared Lambda + HTTP API routes.

A single Lambda keeps the loaded knowledge base warm across routes.
Uses Docker bundling for dependencies (runs in CI/CD pipeline).
"""

from typing import Optional

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct


class ApiLayerConstruct(Construct):
    """Expose the FAQ endpoint via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        usage_table_name: str,
        knowledge_bucket_name: Optional[str] = None,
        analytics_enabled: bool = False,
        usage_ttl_days: int = 30,
        log_level: str = "INFO",
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 10,
    ) -> None:
        super().__init__(scope, construct_id)

        # Bundle Lambda code with dependencies using Docker (works in CI/CD)
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        lambda_env = {
            "ENVIRONMENT": environment,
            "FAQ_USAGE_TABLE": usage_table_name,
            "ENABLE_ANALYTICS": "true" if analytics_enabled else "false",
            "USAGE_TTL_DAYS": str(usage_ttl_days),
            "LOG_LEVEL": log_level,
        }
        if knowledge_bucket_name:
            lambda_env["KNOWLEDGE_BASE_BUCKET"] = knowledge_bucket_name

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.X86_64,
            environment=lambda_env,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        # HTTP API with minimal latency and low cost.
        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"faq-resolver-api-{environment}",
            cors_preflight=apigw.CorsPreflightOptions(
                allow_origins=["*"],
                allow_methods=[apigw.CorsHttpMethod.GET, apigw.CorsHttpMethod.POST],
                allow_headers=["Content-Type"],
            ),
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        route_defs = [
            (apigw.HttpMethod.POST, "/chatbot/faq"),
            (apigw.HttpMethod.GET, "/health"),
        ]

        for method, path in route_defs:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
