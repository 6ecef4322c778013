"""Fixtures for smoke tests against a deployed stack."""

import boto3
import pytest
from botocore.exceptions import BotoCoreError, ClientError

from common.config import Settings


def get_stack_outputs(stack_name: str, region: str) -> dict[str, str]:
    """Get outputs of a deployed CloudFormation stack."""
    cf = boto3.client("cloudformation", region_name=region)
    response = cf.describe_stacks(StackName=stack_name)
    return {o["OutputKey"]: o["OutputValue"] for o in response["Stacks"][0].get("Outputs", [])}


@pytest.fixture(scope="session")
def deployed_settings() -> Settings:
    return Settings()


@pytest.fixture(scope="session")
def stack_outputs(deployed_settings) -> dict[str, str]:
    try:
        return get_stack_outputs(deployed_settings.stack_name, deployed_settings.aws_region)
    except (BotoCoreError, ClientError) as e:
        pytest.skip(f"Cannot get stack outputs: {e}")


@pytest.fixture(scope="session")
def invoke_url(stack_outputs) -> str:
    return stack_outputs["InvokeUrl"]
