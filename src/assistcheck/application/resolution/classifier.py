"""Parameter classifier: assisted vs provided."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.model.parameter import Parameter

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.elements import ExecutableDecl, VariableDecl


def classify_parameter(variable: VariableDecl, config: ProcessorConfig) -> Parameter:
    """Classify a single formal parameter.

    Assisted iff it carries the assisted marker. The key uses the first
    qualifier when several are attached.

    Args:
        variable: Declared parameter
        config: Marker configuration

    Returns:
        Classified Parameter
    """
    qualifier = variable.qualifiers[0] if variable.qualifiers else None
    return Parameter(
        name=variable.name,
        type=variable.type,
        qualifier=qualifier,
        is_assisted=config.assisted_marker in variable.markers,
    )


def classify_parameters(
    executable: ExecutableDecl,
    config: ProcessorConfig,
) -> tuple[Parameter, ...]:
    """Classify all parameters of an executable, keeping declaration order."""
    return tuple(classify_parameter(v, config) for v in executable.parameters)
