"""Candidate collector: types carrying either assisted-injection marker."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from assistcheck.domain.model.diagnostic import Diagnostic
from assistcheck.domain.model.elements import ExecutableDecl
from assistcheck.domain.model.enums import ExecutableKind, Severity, TypeKind

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.elements import TypeDecl
    from assistcheck.domain.ports.diagnostic_sink import DiagnosticSink
    from assistcheck.domain.ports.symbol_model import SymbolModel

logger = logging.getLogger(__name__)


class CandidateCollector:
    """Collects the deduplicated candidate set for one round.

    Sources:
    - enclosing type of every factory-marker site (missing constructor
      markers are then detected by the pipeline)
    - enclosing type of every constructor-marker site (missing factories
      are then detected by the pipeline)

    Misplaced marker sites are reported to the sink without stopping
    collection. Candidates are unique by qualified name and keep
    first-seen order.
    """

    def __init__(
        self,
        model: SymbolModel,
        config: ProcessorConfig,
        sink: DiagnosticSink,
    ) -> None:
        self._model = model
        self._config = config
        self._sink = sink

    def collect(self) -> tuple[TypeDecl, ...]:
        """Collect candidates.

        Returns:
            Candidate types, each exactly once
        """
        candidates: dict[str, TypeDecl] = {}

        for owner in (*self._from_factory_sites(), *self._from_constructor_sites()):
            candidates.setdefault(owner.qualified_name, owner)

        logger.debug("collected %d candidate(s)", len(candidates))
        return tuple(candidates.values())

    def _from_factory_sites(self) -> list[TypeDecl]:
        marker = self._config.factory_marker
        owners: list[TypeDecl] = []

        for site in self._model.elements_marked_with(marker):
            owner = self._model.enclosing_type(site)
            if owner is None or owner.kind is not TypeKind.CLASS:
                self._reject(site, f"@{marker} must be declared as a nested type.")
                continue
            owners.append(owner)

        return owners

    def _from_constructor_sites(self) -> list[TypeDecl]:
        marker = self._config.constructor_marker
        owners: list[TypeDecl] = []

        for site in self._model.elements_marked_with(marker):
            # Marked plain methods still make their type a candidate: the
            # constructor resolver then reports the missing constructor.
            owner = self._model.enclosing_type(site)
            if not isinstance(site, ExecutableDecl) or owner is None:
                self._reject(site, f"@{marker} must annotate a constructor.")
                continue
            if site.kind is not ExecutableKind.CONSTRUCTOR:
                logger.debug("@%s on non-constructor %s", marker, site.qualified_name)
            owners.append(owner)

        return owners

    def _reject(self, site: TypeDecl | ExecutableDecl, message: str) -> None:
        logger.debug("rejected marker site %s: %s", site.qualified_name, message)
        self._sink.report(
            Diagnostic(
                severity=Severity.ERROR,
                message=message,
                location=site.location,
                subject=site.qualified_name,
            )
        )
