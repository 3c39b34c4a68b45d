"""Request builder: pure aggregation of resolved facts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.domain.model.injection_request import InjectionRequest

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import TypeDecl
    from assistcheck.domain.model.injection_request import FactoryMethod, ResolvedConstructor


def build_request(
    target: TypeDecl,
    constructor: ResolvedConstructor,
    factory: TypeDecl,
    factory_method: FactoryMethod,
) -> InjectionRequest:
    """Aggregate resolved parts into an immutable InjectionRequest.

    No validation happens here: callers pass facts already checked by the
    resolvers and the key matcher.
    """
    return InjectionRequest(
        target_type=target,
        constructor=constructor,
        factory_interface=factory,
        factory_method=factory_method,
        all_parameters=constructor.parameters,
    )
