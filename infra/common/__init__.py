from .config import Settings, load_settings, stack_environment
from .logging import bind_stack_context, configure_logging, log_duration

__all__ = [
    "Settings",
    "load_settings",
    "stack_environment",
    "bind_stack_context",
    "configure_logging",
    "log_duration",
]
