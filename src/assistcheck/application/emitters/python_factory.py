"""Python factory emitter: InjectionRequest -> generated source.

For a target

    class Widget:
        @assisted_inject
        def __init__(self, id: Annotated[int, Assisted], logger: Logger) -> None: ...

        @assisted_factory
        class Factory(Protocol):
            def create(self, id: int) -> Widget: ...

the emitter produces

    class Widget_AssistedFactory(Widget.Factory):
        def __init__(self, logger: Callable[[], Logger]) -> None:
            self._logger = logger

        def create(self, id: int) -> Widget:
            return Widget(id, self._logger())

Provided parameters become zero-argument providers captured at
construction. Assisted parameters are routed from the factory method
arguments by key, so the two signatures may order them differently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.enums import ParameterKind
from assistcheck.domain.model.generated import GeneratedSource

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import VariableDecl
    from assistcheck.domain.model.injection_request import InjectionRequest
    from assistcheck.domain.model.key import Key
    from assistcheck.domain.model.parameter import Parameter
    from assistcheck.domain.ports.source_writer import SourceWriterPort

INDENT = "    "


def generated_class_name(request: InjectionRequest, suffix: str) -> str:
    """Name of the generated class: Outer_Widget + suffix."""
    return request.target_type.local_name.replace(".", "_") + suffix


class PythonFactoryEmitter:
    """Renders a factory implementation and hands it to a source writer.

    Stateless apart from its writer: safe to reuse across rounds.
    """

    def __init__(self, writer: SourceWriterPort, config: ProcessorConfig | None = None) -> None:
        if writer is None:
            raise TypeError("writer must not be None")
        self._writer = writer
        self._config = config or ProcessorConfig()

    def emit(self, request: InjectionRequest) -> None:
        """Render request and write it.

        Raises:
            EmitError: If the writer cannot persist the source
        """
        self._writer.write(self.render(request))

    def render(self, request: InjectionRequest) -> GeneratedSource:
        """Render the factory implementation for request."""
        target = request.target_type
        class_name = generated_class_name(request, self._config.generated_suffix)
        top_level = target.local_name.split(".", 1)[0]
        qualified = any(p.qualifier for p in request.all_parameters + request.factory_parameters)

        lines = [
            f"# Generated by @{self._config.constructor_marker}. Do not modify!",
            "from __future__ import annotations",
            "",
            "from collections.abc import Callable",
        ]
        if qualified:
            lines.append("from typing import Annotated")
        lines += [
            "",
            f"from {target.module} import {top_level}",
            "",
            "",
            f"class {class_name}({request.factory_interface.local_name}):",
            f'{INDENT}"""Assisted factory for {target.qualified_name}."""',
            "",
            *self._render_init(request),
            "",
            *self._render_factory_method(request),
        ]
        return GeneratedSource(
            module=target.module,
            class_name=class_name,
            text="\n".join(lines) + "\n",
        )

    def _render_init(self, request: InjectionRequest) -> list[str]:
        provided = request.provided_parameters
        params = ", ".join(f"{p.name}: {_provider_annotation(p)}" for p in provided)
        lines = [f"{INDENT}def __init__(self, {params}) -> None:"]
        lines += [f"{INDENT * 2}self._{p.name} = {p.name}" for p in provided]
        return lines

    def _render_factory_method(self, request: InjectionRequest) -> list[str]:
        method = request.factory_method
        target = request.target_type
        declared = method.declaration.parameters

        signature = _render_signature(declared, request.factory_parameters)
        returns = method.return_type or target.local_name
        prefix = "self, " if signature else "self"

        # First factory argument per key; keys are unique on the constructor side.
        by_key: dict[Key, str] = {}
        for param in request.factory_parameters:
            by_key.setdefault(param.key, param.name)

        arguments = [
            _render_argument(variable, param, by_key)
            for variable, param in zip(
                request.constructor.declaration.parameters, request.all_parameters, strict=True
            )
        ]
        return [
            f"{INDENT}def {method.name}({prefix}{signature}) -> {returns}:",
            f"{INDENT * 2}return {target.local_name}({', '.join(arguments)})",
        ]


def _provider_annotation(param: Parameter) -> str:
    provider = f"Callable[[], {param.type}]"
    if param.qualifier is None:
        return provider
    return f"Annotated[{provider}, {param.qualifier}]"


def _render_signature(
    variables: tuple[VariableDecl, ...],
    params: tuple[Parameter, ...],
) -> str:
    """Reproduce a parameter list including `/` and `*` separators."""
    parts: list[str] = []
    seen_star = False
    positional_only_open = False

    for variable, param in zip(variables, params, strict=True):
        annotation = str(param.key)
        match variable.kind:
            case ParameterKind.POSITIONAL_ONLY:
                positional_only_open = True
                parts.append(f"{variable.name}: {annotation}")
                continue
            case _ if positional_only_open:
                parts.append("/")
                positional_only_open = False

        match variable.kind:
            case ParameterKind.VAR_POSITIONAL:
                seen_star = True
                parts.append(f"*{variable.name}: {annotation}")
            case ParameterKind.KEYWORD_ONLY:
                if not seen_star:
                    seen_star = True
                    parts.append("*")
                parts.append(f"{variable.name}: {annotation}")
            case ParameterKind.VAR_KEYWORD:
                parts.append(f"**{variable.name}: {annotation}")
            case _:
                parts.append(f"{variable.name}: {annotation}")

    if positional_only_open:
        parts.append("/")
    return ", ".join(parts)


def _render_argument(variable: VariableDecl, param: Parameter, by_key: dict[Key, str]) -> str:
    value = by_key[param.key] if param.is_assisted else f"self._{param.name}()"
    match variable.kind:
        case ParameterKind.VAR_POSITIONAL:
            return f"*{value}"
        case ParameterKind.KEYWORD_ONLY:
            return f"{variable.name}={value}"
        case ParameterKind.VAR_KEYWORD:
            return f"**{value}"
        case _:
            return value
