"""Python-level exceptions raised at the edges of the Lispy runtime.

Failures inside the language are ordinary `Error` values (see
`lispy.types.value`). The classes below are only raised by the reader, the
file loader and configuration parsing.
"""


class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when source text cannot be tokenized or parsed"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

class LispyLoadError(LispyError):
    """ Raised when a source file cannot be opened"""

class LispyConfigError(LispyError):
    """ Raised when an environment variable holds an unusable value"""
