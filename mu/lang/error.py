"""Error handling for the Mu language. Only MuExceptions should be encountered while running a Mu program: if another
type of error makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class MuException(Exception):
    """Templates an error/warning message so that it can be used to throw a Mu error/warning. exprs[0] should be the
    offending source text, start and end delimit the offending span within it.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)


class UnexpectedToken(MuException):
    """Raised by the parser when a token does not fit the grammar at the cursor, or when the cursor runs past the end
    of the token sequence (token is None in that case).
    """

    def __init__(self, token, index, expected, source=""):
        self.token = token
        self.index = index
        self.expected = expected

        if token is None:
            got = "end of input"
            start = len(source)
        else:
            got = f"'{token.lexeme}'"
            start = token.column

        diagnosis = bool(source) and start >= 0
        msg = "expected {1} but got {2} at token " + str(index)
        super().__init__(msg, [source, expected, got], start=start, end=start + 1, diagnosis=diagnosis)


class UnknownOperator(MuException):
    """Raised by the interpreter when an expression's operator has no known semantics."""

    def __init__(self, operator):
        self.operator = operator
        super().__init__("unknown operator '{}'", operator, diagnosis=False)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report Mu errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded, with a marker underneath."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args."""
        error = MuException(*args, **kwargs)

        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error, which must be a MuException. Exits with status 1 if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(MuException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(MuException("maximum nesting depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, MuException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(MuException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
