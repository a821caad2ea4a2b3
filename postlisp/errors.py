class PostLispError(Exception):
    """ Base class for all PostLisp errors"""
    pass

class PostLispSyntaxError(PostLispError):
    """ Raised when source text does not form exactly one valid expression"""

    def __init__(self, message: str = "parse error"):
        super().__init__(message)

class PostLispSemanticError(PostLispError):
    """ Base class for errors raised while evaluating a well-formed expression"""
    pass

class PostLispUnboundSymbol(PostLispSemanticError):
    """ Raised when a symbol is used before it is bound to a value"""

class PostLispUnknownProcedure(PostLispSemanticError):
    """ Raised when a call names something that is not a builtin procedure"""

class PostLispArityError(PostLispSemanticError):
    """ Raised when the number of arguments passed to a procedure or form is incorrect"""

class PostLispTypeError(PostLispSemanticError):
    """ Raised when an argument is not the required kind of value"""

class PostLispDomainError(PostLispSemanticError):
    """ Raised when a math function is applied outside its domain"""

class PostLispDivisionByZero(PostLispSemanticError):
    """ Raised when dividing by zero"""

class PostLispRedefinitionError(PostLispSemanticError):
    """ Raised when define targets a name that already occupies the environment"""

class PostLispMalformedExpression(PostLispSemanticError):
    """ Raised when a call expression has a non-symbol head"""
