"""Built-in Actions for the hello world action"""

from .hello_world_action import HelloWorldAction

__all__ = [
    'HelloWorldAction',
]
