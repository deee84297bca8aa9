

class MLispError(Exception):
    """ Base class for all mlisp errors"""
    pass

class MLispSyntaxError(MLispError):
    """ Raised by the reader on malformed input; surfaces as a ParseError value"""

class MLispArityError(MLispError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class MLispTypeError(MLispError):
    """ Raised when the types of arguments passed to a form or function are incorrect"""

class MLispArithmeticError(MLispError):
    """ Raised on division by zero or integer overflow"""

class MLispInvalidSymbol(MLispError):
    """ Raised when something other than a Symbol is used as a name"""

class MLispEvalError(MLispError):
    """ Raised when a non-interactive line evaluates to an EvalError"""
