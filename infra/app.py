#!/usr/bin/env python3
"""CDK App for the Hello API infrastructure."""

import sys

import aws_cdk as cdk
import structlog
from pydantic import ValidationError

from common import bind_stack_context, configure_logging, load_settings, log_duration, stack_environment
from stacks import HelloApiStack

app = cdk.App()

configure_logging("hello-api-infra")
logger = structlog.get_logger(__name__)

try:
    settings = load_settings(app)
except ValidationError as e:
    logger.error("invalid_configuration", errors=e.errors(include_url=False))
    sys.exit(1)

configure_logging(settings.project_name, settings.log_level)
bind_stack_context(settings.stack_name, settings.aws_region, settings.stage_name)

# API - Lambda + API Gateway REST API
HelloApiStack(
    app,
    settings.stack_name,
    settings=settings,
    env=stack_environment(settings),
)

logger.info("synth_started", path=settings.resource_path)

with log_duration(logger, "synth_completed"):
    app.synth()
