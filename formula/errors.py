
class FormulaError(Exception):
    """ Base class for all Formula errors"""
    pass

class FormulaLexError(FormulaError):
    """ Raised when numeric-looking text is not a valid number literal"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message if pos is None else f"{message} at {pos}")
        self.pos = pos

class FormulaParseError(FormulaError):
    """ Raised when the token stream does not form a valid expression"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message if pos is None else f"{message} at {pos}")
        self.pos = pos

class FormulaUnexpectedToken(FormulaParseError):
    """ Raised when a token appears where it cannot start an expression"""

class FormulaUnexpectedEof(FormulaParseError):
    """ Raised when input ends before an expression is complete"""

class FormulaEvalError(FormulaError):
    """ Raised when an expression cannot be evaluated"""

class FormulaUnboundSymbol(FormulaEvalError):
    """ Raised when a symbol is used before it is bound"""

class FormulaNotCallable(FormulaEvalError):
    """ Raised when the head of a combination is not a callable value"""

class FormulaArityError(FormulaEvalError):
    """ Raised when the number of arguments passed to a form or primitive is incorrect"""

class FormulaTypeError(FormulaEvalError):
    """ Raised when the types of arguments passed to a form or primitive are incorrect"""

class FormulaDivisionByZero(FormulaEvalError):
    """ Raised when a primitive divides by zero"""
