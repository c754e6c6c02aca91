class YoctoError(Exception):
    """ Base class for all Yocto errors"""
    pass

class YoctoUndefinedName(YoctoError):
    """ Raised when a name is not bound anywhere in the environment chain"""
    pass

class YoctoNotCallable(YoctoError):
    """ Raised when the head of a call does not evaluate to a function"""

class YoctoArityError(YoctoError):
    """ Raised when the number of arguments passed to a function, macro or special form is incorrect"""

class YoctoTypeError(YoctoError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class YoctoMalformedForm(YoctoError):
    """ Raised when a special form is structurally invalid"""

class YoctoInvalidSymbol(YoctoMalformedForm):
    """ Raised when something other than a name is used as a binding target"""

class YoctoArithmeticError(YoctoError):
    """ Raised on division or modulo by zero and on operands a numeric builtin cannot handle"""

class YoctoSyntaxError(YoctoError):
    """ Raised when source text cannot be read"""
