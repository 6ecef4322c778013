import logging
import re
from pathlib import Path

import aws_cdk as cdk
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

HTTP_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "ANY"}

# CDK context keys that may override environment settings
CONTEXT_OVERRIDES = {
    "account": "aws_account",
    "region": "aws_region",
    "stage_name": "stage_name",
    "resource_path": "resource_path",
}


class Settings(BaseSettings):
    """Infrastructure settings loaded from environment and CDK context."""

    # Project
    project_name: str = "hello-api"

    # AWS
    aws_account: str | None = None
    aws_region: str = "ap-northeast-1"

    # API Gateway
    api_description: str = "Example API"
    stage_name: str = "prod"
    resource_path: str = "hello"
    http_method: str = "GET"

    # Lambda
    # Relative paths resolve against the directory cdk runs in (the project root)
    lambda_asset_path: Path = Field(default=Path("hello-lambda"), validate_default=True)
    lambda_handler: str = "main.handler"
    lambda_memory_mb: int = 128
    lambda_timeout_seconds: int = 10
    greeting: str = "Hello"
    log_level: str = "INFO"

    @field_validator("stage_name")
    @classmethod
    def validate_stage_name(cls, v: str) -> str:
        if not re.fullmatch(r"[A-Za-z0-9_]+", v):
            raise ValueError("Stage name may only contain letters, digits and underscores")
        return v

    @field_validator("resource_path")
    @classmethod
    def validate_resource_path(cls, v: str) -> str:
        v = v.strip("/")
        if not re.fullmatch(r"[A-Za-z0-9._-]+", v):
            raise ValueError("Resource path must be a single segment of letters, digits, '-', '_' or '.'")
        return v

    @field_validator("http_method")
    @classmethod
    def validate_http_method(cls, v: str) -> str:
        v = v.upper()
        if v not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {v}")
        return v

    @field_validator("lambda_memory_mb")
    @classmethod
    def validate_memory(cls, v: int) -> int:
        if not 128 <= v <= 10240:
            raise ValueError("Lambda memory must be between 128 and 10240 MB")
        return v

    @field_validator("lambda_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if not 1 <= v <= 900:
            raise ValueError("Lambda timeout must be between 1 and 900 seconds")
        return v

    @field_validator("lambda_asset_path")
    @classmethod
    def resolve_asset_path(cls, v: Path) -> Path:
        return v.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @model_validator(mode="after")
    def validate_lambda_asset(self) -> "Settings":
        module = self.lambda_handler.rsplit(".", 1)[0]
        handler_file = self.lambda_asset_path / f"{module.replace('.', '/')}.py"
        if not self.lambda_asset_path.is_dir():
            raise ValueError(f"Lambda asset directory not found: {self.lambda_asset_path}")
        if not handler_file.is_file():
            raise ValueError(f"Handler module not found: {handler_file}")
        return self

    @property
    def stack_name(self) -> str:
        return "".join(part.capitalize() for part in re.split(r"[-_\s]+", self.project_name)) + "Stack"

    class Config:
        env_prefix = "HELLO_API_"
        env_file = ".env"
        case_sensitive = False


def load_settings(app: cdk.App) -> Settings:
    """
    Build settings for a CDK app.

    CDK context values (cdk.json or ``-c key=value``) take precedence
    over environment variables.
    """
    overrides = {}
    for context_key, field in CONTEXT_OVERRIDES.items():
        value = app.node.try_get_context(context_key)
        if value:
            overrides[field] = value
    return Settings(**overrides)


def stack_environment(settings: Settings) -> cdk.Environment:
    return cdk.Environment(
        account=settings.aws_account,
        region=settings.aws_region,
    )
