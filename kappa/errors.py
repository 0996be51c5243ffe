class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass

class KappaSyntaxError(KappaError):
    """ Raised when source text or a special form is malformed"""

class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is looked up or set! before it is bound"""

class KappaArityError(KappaError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class KappaTypeError(KappaError):
    """ Raised when the types of arguments passed to a form or procedure are incorrect"""

class KappaZeroDivisionError(KappaError):
    """ Raised when / or modulo is given a zero divisor"""
