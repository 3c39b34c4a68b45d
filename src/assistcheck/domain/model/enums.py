"""Domain enumerations."""

from enum import Enum, auto


class Visibility(Enum):
    """Declaration visibility by naming convention."""

    PUBLIC = auto()  # no underscore
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name


class Severity(Enum):
    """Diagnostic severity.

    The pipeline only reports ERROR. WARNING and INFO are available to
    hosts and third-party sinks sharing the DiagnosticSink port.
    """

    ERROR = auto()
    WARNING = auto()
    INFO = auto()


class TypeKind(Enum):
    """Shape of a declared type."""

    CLASS = auto()  # concrete or partially abstract class
    INTERFACE = auto()  # Protocol or ABC: pure contract


class ExecutableKind(Enum):
    """Role of a callable declared in a type body."""

    CONSTRUCTOR = auto()  # __init__
    METHOD = auto()


class ParameterKind(Enum):
    """How an argument binds to a parameter (mirrors inspect.Parameter kinds)."""

    POSITIONAL_ONLY = auto()
    POSITIONAL_OR_KEYWORD = auto()
    VAR_POSITIONAL = auto()  # *args
    KEYWORD_ONLY = auto()
    VAR_KEYWORD = auto()  # **kwargs


class FailureKind(Enum):
    """Validation failure taxonomy.

    - STRUCTURAL: wrong declaration shape (private, not nested, not an interface)
    - CARDINALITY: zero or multiple constructors/factories/factory methods
    - POOL: empty assisted or provided parameter pool
    - DUPLICATION: repeated key within a pool
    - MISMATCH: factory keys differ from assisted keys
    - INTERNAL: unexpected failure during emission
    """

    STRUCTURAL = auto()
    CARDINALITY = auto()
    POOL = auto()
    DUPLICATION = auto()
    MISMATCH = auto()
    INTERNAL = auto()
