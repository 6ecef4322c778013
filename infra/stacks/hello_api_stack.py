"""Hello API Stack - Lambda function behind an API Gateway REST API."""

from aws_cdk import (
    CfnOutput,
    Duration,
    RemovalPolicy,
    Stack,
)
from aws_cdk import (
    aws_apigateway as apigw,
)
from aws_cdk import (
    aws_iam as iam,
)
from aws_cdk import (
    aws_lambda as lambda_,
)
from aws_cdk import (
    aws_logs as logs,
)
from constructs import Construct

from common.config import Settings


class HelloApiStack(Stack):
    """IAM role, Lambda function and REST API with an explicit deployment and stage."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Execution role for the function
        self.lambda_role = iam.Role(
            self,
            "LambdaRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ],
        )

        self.log_group = logs.LogGroup(
            self,
            "HelloFunctionLogs",
            retention=logs.RetentionDays.ONE_MONTH,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Hello Lambda function
        self.hello_function = lambda_.Function(
            self,
            "HelloFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler=settings.lambda_handler,
            code=lambda_.Code.from_asset(
                str(settings.lambda_asset_path),
                exclude=["tests", "__pycache__"],
            ),
            role=self.lambda_role,
            environment={
                "GREETING": settings.greeting,
                "HTTP_METHOD": settings.http_method,
                "LOG_LEVEL": settings.log_level,
            },
            timeout=Duration.seconds(settings.lambda_timeout_seconds),
            memory_size=settings.lambda_memory_mb,
            architecture=lambda_.Architecture.ARM_64,
            log_group=self.log_group,
        )

        # REST API; deployment and stage are declared below
        self.api = apigw.RestApi(
            self,
            "HelloApi",
            rest_api_name=f"{settings.project_name}-api",
            description=settings.api_description,
            deploy=False,
            cloud_watch_role=False,
        )

        resource = self.api.root.add_resource(settings.resource_path)

        # Proxy integration - Lambda is always invoked with POST
        integration = apigw.LambdaIntegration(
            self.hello_function,
            proxy=True,
        )

        self.method = resource.add_method(
            settings.http_method,
            integration,
            authorization_type=apigw.AuthorizationType.NONE,
        )

        # Deployment must wait for the method and its integration
        deployment = apigw.Deployment(
            self,
            "Deployment",
            api=self.api,
            description=f"{settings.project_name} deployment",
        )
        deployment.node.add_dependency(self.method)

        self.stage = apigw.Stage(
            self,
            "Stage",
            deployment=deployment,
            stage_name=settings.stage_name,
        )
        self.api.deployment_stage = self.stage

        self.invoke_url = (
            f"https://{self.api.rest_api_id}.execute-api.{self.region}.{self.url_suffix}"
            f"/{settings.stage_name}/{settings.resource_path}"
        )

        # Outputs
        CfnOutput(
            self,
            "InvokeUrl",
            value=self.invoke_url,
            description="Invocation URL of the stage",
        )

        CfnOutput(
            self,
            "RestApiId",
            value=self.api.rest_api_id,
        )

        CfnOutput(
            self,
            "FunctionName",
            value=self.hello_function.function_name,
        )
