from typing import Any


class PieError(Exception):
    """ Base class for all Pie errors"""
    pass


class PieInternalError(PieError):
    """ Raised when the core is handed input no rule recognizes (a broken front-end)"""
    pass


class PieTypeError(PieError):
    """ Base class for judgments that reject an expression"""

    def __init__(self, message: str, location: Any = None):
        super().__init__(message)
        self.message = message
        # Opaque to the core; a hosting driver attaches its own source position.
        self.location = location

    def __str__(self):
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"


class PieUnboundVariable(PieTypeError):
    """ Raised when a variable is not bound in the context"""

    def __init__(self, name, location: Any = None):
        super().__init__(f"Unknown variable {name}", location)
        self.name = name


class PieEliminatorTargetMismatch(PieTypeError):
    """ Raised when an eliminator's target has the wrong type constructor"""

    def __init__(self, eliminator: str, expected: str, found, location: Any = None):
        super().__init__(
            f"{eliminator} expected a target of type {expected}, but its type is {found}",
            location,
        )
        self.eliminator = eliminator
        self.expected = expected
        self.found = found


class PieNotAFunctionType(PieEliminatorTargetMismatch):
    """ Raised when something that is not a function is applied"""

    def __init__(self, found, location: Any = None):
        super().__init__("application", "Π", found, location)


class PieNotAPairType(PieEliminatorTargetMismatch):
    """ Raised when car or cdr is used on something that is not a pair"""

    def __init__(self, eliminator: str, found, location: Any = None):
        super().__init__(eliminator, "Σ", found, location)


class PieNotAUniverse(PieTypeError):
    """ Raised when a type was expected but the expression is not a type"""

    def __init__(self, expr, found, location: Any = None):
        super().__init__(f"Expected U, but {expr} has type {found}", location)
        self.expr = expr
        self.found = found


class PieTypeMismatch(PieTypeError):
    """ Raised when a checked type is not the same as the expected type"""

    def __init__(self, expected, found, message: str | None = None, location: Any = None):
        super().__init__(message or f"Expected {expected}, but got {found}", location)
        self.expected = expected
        self.found = found


class PieDuplicateBinderName(PieTypeError):
    """ Raised when a name is bound twice in one scope"""

    def __init__(self, name, location: Any = None):
        super().__init__(f"The name {name} is already in use", location)
        self.name = name


class PieIncompleteTerm(PieTypeError):
    """ Raised for the TODO marker; holes are always reported"""

    def __init__(self, expected=None, location: Any = None):
        if expected is None:
            message = "TODO: incomplete term"
        else:
            message = f"TODO: incomplete term of type {expected}"
        super().__init__(message, location)
        self.expected = expected


class PieAnnotationRequired(PieTypeError):
    """ Raised when an expression's type cannot be determined without annotation"""

    def __init__(self, expr, location: Any = None):
        super().__init__(f"Can't determine a type for {expr}; add a `the`", location)
        self.expr = expr


class PieInvalidAtom(PieTypeError):
    """ Raised when a quoted atom is not made of letters and hyphens"""

    def __init__(self, atom: str, location: Any = None):
        super().__init__(f"Invalid atom: '{atom}", location)
        self.atom = atom
