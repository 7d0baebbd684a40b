class YallError(Exception):
    """ Base class for all yall errors"""
    pass

class YallSyntaxError(YallError):
    """ Raised by the reader on malformed input"""

class YallEndOfInput(YallSyntaxError):
    """ Raised when the input stream is exhausted before a token starts"""

class YallRuntimeError(YallError):
    """ Raised by the evaluator and the builtins"""

class YallUnboundSymbol(YallRuntimeError):
    """ Raised when a symbol is used before it is bound"""

class YallTypeError(YallRuntimeError):
    """ Raised when a value has the wrong type or shape"""

class YallArityError(YallRuntimeError):
    """ Raised when too few arguments are passed"""

class YallNotCallableError(YallRuntimeError):
    """ Raised when the head of a form is not callable"""

class YallRedefinitionError(YallRuntimeError):
    """ Raised when a name is bound twice in the same frame"""

class YallLoadError(YallRuntimeError):
    """ Raised when a source file cannot be loaded"""

class YallBootstrapError(YallRuntimeError):
    """ Raised when the prelude cannot be loaded into a new global environment"""
