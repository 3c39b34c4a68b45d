"""AST analyzers producing symbol declarations."""

from assistcheck.infrastructure.analyzers.annotation_analyzer import (
    AnnotationAnalyzer,
    AnnotationInfo,
)
from assistcheck.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from assistcheck.infrastructure.analyzers.function_analyzer import FunctionAnalyzer

__all__ = [
    "AnnotationAnalyzer",
    "AnnotationInfo",
    "ClassAnalyzer",
    "FunctionAnalyzer",
]
