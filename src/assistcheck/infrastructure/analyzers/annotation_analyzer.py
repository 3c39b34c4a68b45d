"""Parameter annotation analyzer.

Splits `Annotated[T, *metadata]` into the declared type T and the
markers/qualifiers found in the metadata:

    int                                   → int
    Annotated[int, Assisted]              → int, markers={"Assisted"}
    Annotated[Logger, Named("audit")]     → Logger, qualifiers=("Named('audit')",)
    "Annotated[int, Assisted]"            → parsed as the unquoted form

Metadata that is neither the assisted marker nor a configured qualifier is
ignored (e.g. validation constraints).
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import TYPE_CHECKING

from assistcheck.domain.model.elements import UNTYPED
from assistcheck.infrastructure.analyzers.base import marker_name

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig


@dataclass(frozen=True, slots=True)
class AnnotationInfo:
    """Analyzed annotation.

    Attributes:
        type: Declared type as source text
        markers: Marker names found in Annotated metadata
        qualifiers: Qualifier entries as source text, in order
    """

    type: str
    markers: frozenset[str] = frozenset()
    qualifiers: tuple[str, ...] = ()


class AnnotationAnalyzer:
    """Extracts type, markers and qualifiers from annotation AST.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self, config: ProcessorConfig) -> None:
        self._config = config

    def analyze(self, node: ast.expr | None) -> AnnotationInfo:
        """Analyze a parameter annotation.

        Args:
            node: Annotation expression, None if unannotated

        Returns:
            AnnotationInfo (type is "Any" when unannotated)
        """
        match node:
            case None:
                return AnnotationInfo(type=UNTYPED)
            case ast.Constant(value=str() as text):
                return self._analyze_forward_reference(text)
            case ast.Subscript(value=value, slice=ast.Tuple(elts=[base, *metadata])) if (
                marker_name(value) == "Annotated"
            ):
                return self._merge(self.analyze(base), metadata)
            case ast.Subscript(value=value, slice=base) if marker_name(value) == "Annotated":
                return self.analyze(base)
        return AnnotationInfo(type=ast.unparse(node))

    def _analyze_forward_reference(self, text: str) -> AnnotationInfo:
        try:
            parsed = ast.parse(text.strip(), mode="eval")
        except SyntaxError:
            # Not an expression: keep the text as the type name
            return AnnotationInfo(type=text)
        return self.analyze(parsed.body)

    def _merge(self, inner: AnnotationInfo, metadata: list[ast.expr]) -> AnnotationInfo:
        """Nested Annotated flattens: outer metadata follows inner metadata."""
        markers = set(inner.markers)
        qualifiers = list(inner.qualifiers)

        for entry in metadata:
            name = marker_name(entry)
            if name == self._config.assisted_marker:
                markers.add(name)
            elif name in self._config.qualifier_markers:
                qualifiers.append(_qualifier_text(name, entry))

        return AnnotationInfo(
            type=inner.type,
            markers=frozenset(markers),
            qualifiers=tuple(qualifiers),
        )


def _qualifier_text(name: str, entry: ast.expr) -> str:
    """Qualifier identity: bare marker name plus call arguments.

    `markers.Named("k")` and `Named("k")` render the same, so the spelling
    of the import does not change the key.
    """
    match entry:
        case ast.Call(args=args, keywords=keywords):
            arguments = [ast.unparse(arg) for arg in args]
            arguments += [
                f"{kw.arg}={ast.unparse(kw.value)}" if kw.arg else f"**{ast.unparse(kw.value)}"
                for kw in keywords
            ]
            return f"{name}({', '.join(arguments)})"
    return name
