import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Template

from common.config import Settings
from stacks import HelloApiStack


@pytest.fixture(autouse=True)
def project_root(request, monkeypatch):
    """Run from the project root, where cdk.json and hello-lambda/ live."""
    monkeypatch.chdir(request.config.rootpath)
    return request.config.rootpath


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def stack(settings) -> HelloApiStack:
    app = cdk.App()
    return HelloApiStack(
        app,
        "TestHelloApiStack",
        settings=settings,
        env=cdk.Environment(account="123456789012", region=settings.aws_region),
    )


@pytest.fixture
def template(stack) -> Template:
    return Template.from_stack(stack)
