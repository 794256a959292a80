class SlispError(Exception):
    """ Base class for all slisp errors"""
    pass


class SlispTokenizeError(SlispError):
    """ Raised when a character matches none of the token alternatives"""

    def __init__(self, char: str, position: int):
        super().__init__(f"Unexpected character {char!r} at {position}")
        self.char = char
        self.position = position


class SlispParseError(SlispError):
    """ Raised when the token stream is structurally malformed"""

    def __init__(self, description: str):
        super().__init__(f"Parse error: {description}")
        self.description = description


class SlispRuntimeError(SlispError):
    """ Base class for errors raised while evaluating"""
    pass


class SlispUnboundSymbol(SlispRuntimeError):
    """ Raised when a symbol is used before it is bound"""
    pass


class SlispArityError(SlispRuntimeError):
    """ Raised when a form receives the wrong number of arguments"""


class SlispTypeError(SlispRuntimeError):
    """ Raised when an operand or callee has the wrong type"""


class SlispInvalidSymbol(SlispRuntimeError):
    """ Raised when a symbol is required and something else was given"""


class SlispSyntaxError(SlispRuntimeError):
    """ Raised when a special form has a malformed shape"""
