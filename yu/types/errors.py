class YuError(Exception):
    """ Base class for all Yu errors"""
    pass


class YuInvalidType(YuError):
    """ Raised when an operand has the wrong type for an operation"""
    pass


class YuWrongArity(YuError):
    """ Raised when a call or form receives the wrong number of operands"""
    pass


class YuUndefinedSymbol(YuError):
    """ Raised when a symbol is neither reserved nor bound in the frame chain"""

    def __init__(self, name: str):
        super().__init__(f"'{name}' is undefined")
        self.name = name


class YuNotCallable(YuError):
    """ Raised when the head of an application is not a function or built-in"""
    pass


class YuSyntaxError(YuError):
    """ Raised when source text cannot be read"""
