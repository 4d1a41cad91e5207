
class LispError(Exception):
    """ Base class for all tinylisp errors"""
    pass

class ParseError(LispError):
    """ Raised when source text is lexically or structurally malformed"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position

class EvalError(LispError):
    """ Raised when evaluation of a form fails"""
    pass

class UnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

class TypeMismatch(EvalError):
    """ Raised when a value of the wrong variant is passed or accessed"""

class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class DivisionByZero(EvalError):
    """ Raised when `/` meets a zero divisor"""

class NotCallable(EvalError):
    """ Raised when the head of an application is neither a builtin nor a closure"""

class MalformedSpecialForm(EvalError):
    """ Raised when quote, if, define or lambda is given the wrong argument shape"""

class MalformedExpression(EvalError):
    """ Raised when an application's argument list is not a proper list"""

class RecursionLimitExceeded(EvalError):
    """ Raised when evaluation exhausts the host call stack"""
