from __future__ import annotations


class LispError(Exception):
    """ Base class for all minilisp errors"""
    pass


class LispSyntaxError(LispError):
    """ Raised when a form does not have the shape an operation requires"""


class LispNotAListError(LispSyntaxError):
    """ Raised when a proper list was expected and the spine ends in a non-nil atom"""


class LispEmptyListError(LispSyntaxError):
    """ Raised when destructuring runs past the end of a list"""


class LispReadError(LispSyntaxError):
    """ Raised when source text cannot be read"""


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name: str, expected: int, found: int):
        super().__init__(f"{name}: expected {expected} arguments, found {found}")
        self.name = name
        self.expected = expected
        self.found = found


class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class LispOverflowError(LispTypeError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class LispUnboundSymbol(LispError):
    """ Raised when a symbol is neither a builtin nor bound in any scope on the path"""

    def __init__(self, name: str):
        super().__init__(f"unbound symbol: {name}")
        self.name = name


class LispNotCallable(LispError):
    """ Raised when the operator position of a call is not a function"""

    def __init__(self, value, message: str):
        super().__init__(message)
        self.value = value


class LispScopeError(LispError):
    """ Raised when a scope id does not name an allocated scope"""


class LispRecursionError(LispError):
    """ Raised when evaluation exhausts the host call stack"""
