from .hello_api_stack import HelloApiStack

__all__ = [
    "HelloApiStack",
]
