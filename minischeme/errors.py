
class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised when a form is malformed"""

class SchemeUnexpectedEOF(SchemeSyntaxError):
    """ Raised when the tokens run out while a form was expected"""

class SchemeUnterminatedList(SchemeUnexpectedEOF):
    """ Raised when the tokens run out before a list's closing paren"""

class SchemeUnexpectedCloseParen(SchemeSyntaxError):
    """ Raised when a ')' appears where a form was expected"""

class SchemeNameError(SchemeError):
    """ Raised when a symbol is used before it is defined, or is not callable"""

class SchemeTypeError(SchemeError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SchemeEmptyListError(SchemeTypeError):
    """ Raised when car/cdr receive an empty list"""

class SchemeArityError(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemeDefineArityError(SchemeArityError, SchemeSyntaxError):
    """ Raised when define has the wrong number of operands"""

class SchemeOverflowError(SchemeError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""

class SchemeRecursionError(SchemeError):
    """ Raised when the input is nested too deeply for the host stack"""
