class EmberError(Exception):
    """ Base class for all Ember errors"""
    pass

class EmberSyntaxError(EmberError):
    """ Raised when the reader cannot make sense of its input"""

class EmberInvalidSymbol(EmberError):
    """ Raised when an invalid symbol is used"""
    pass

class EmberUnboundSymbol(EmberError):
    """ Raised when a symbol is used before it is bound"""
    pass

class EmberArityError(EmberError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class EmberTypeError(EmberError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class EmberArithmeticError(EmberError):
    """ Raised on division or modulo by zero"""

class EmberRecursionError(EmberError):
    """ Raised when evaluation nests deeper than the host interpreter allows"""

class EnvironmentBorrowError(EmberError):
    """ Raised when the session environment is borrowed while already in use"""
