class YaftError(Exception):
    """ Base class for all yaft errors"""
    pass

class StackUnderflow(YaftError):
    """ Raised when a word pops more values than the stack holds"""
    pass

class YaftTypeError(YaftError):
    """ Raised when a word receives an operand of the wrong kind"""

class DivisionByZero(YaftError):
    """ Raised when `/` is asked to divide by zero"""

class RecursionDepthExceeded(YaftError):
    """ Raised when nested quotations or definitions recurse too deeply"""

class YaftSyntaxError(YaftError):
    """ Raised when program text cannot be structured into a node sequence"""

class MalformedMapping(YaftSyntaxError):
    """ Raised when a brace group holds neither zero nor two elements"""

class UnterminatedGroup(YaftSyntaxError):
    """ Raised when an opening bracket is never closed"""

class MismatchedGroup(YaftSyntaxError):
    """ Raised when a group is closed by the other bracket kind"""

class UnexpectedCloser(YaftSyntaxError):
    """ Raised when a closing bracket appears with no open group"""
