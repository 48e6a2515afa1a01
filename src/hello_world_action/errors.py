"""Exception types raised by the step toolkit."""


class ActionError(Exception):
    """Base class for errors raised while running a step."""


class InputError(ActionError):
    """A named input is missing or malformed."""


class CommandError(ActionError):
    """A workflow command or file command could not be issued."""


class ContextError(ActionError):
    """The invocation context could not be read from the runner environment."""


class ConfigError(ActionError):
    """The action metadata file is invalid."""
