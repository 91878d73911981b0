from __future__ import annotations


class CrispError(Exception):
    """ Base class for all crisp errors"""
    pass


class CrispSyntaxError(CrispError):
    """ Raised when the token stream is malformed"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class CrispMissingParen(CrispError):
    """ Raised when an expression was expected but no tokens are left"""

    def __init__(self, line: int = 1, char: int = 0):
        super().__init__(f"Missing parenthesis at line {line}, char {char}")
        self.line = line
        self.char = char


class CrispEvalError(CrispError):
    """ Raised for every semantic failure during evaluation"""
    pass


class CrispUnboundSymbol(CrispEvalError):
    """ Raised when a symbol is used before it is bound"""
    pass


class CrispNameError(CrispEvalError):
    """ Raised when a name is defined twice in the same scope"""


class CrispArityError(CrispEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class CrispTypeError(CrispEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class CrispParamListError(CrispSyntaxError, CrispEvalError):
    """ Raised when a fn parameter list holds something other than distinct symbols"""

    def __init__(self, message: str = "Param list must contain only symbols"):
        super().__init__(message)
