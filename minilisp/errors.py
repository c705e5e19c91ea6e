class LispError(Exception):
    """ Base class for all minilisp errors"""
    kind = "Error"


class LispSyntaxError(LispError):
    """ Raised when the reader meets malformed input"""
    kind = "SyntaxError"


class LispTypeError(LispError):
    """ Raised when an operand has the wrong type"""
    kind = "TypeError"


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = "ArityError"


class LispUndefinedSymbol(LispError):
    """ Raised when a symbol is looked up before it is bound"""
    kind = "UndefinedSymbol"

    def __init__(self, name):
        super().__init__(f"Undefined symbol: {name}")
        self.name = name


class LispRecursionError(LispError):
    """ Raised when input or evaluation nests deeper than the host stack allows"""
    kind = "RecursionError"
