"""Pipeline driver: one processing round over a symbol model.

Round lifecycle:

    IDLE -> COLLECTING -> VALIDATING (once per candidate) -> DONE

Each candidate is isolated: a failure is reported once and the round
moves on. An unexpected exception while validating a candidate is reported
as an internal error for that candidate only. Emission is fire-and-forget; a crashing emitter is reported as
an internal error for that candidate and never rolls back earlier output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from assistcheck.application.collectors.candidates import CandidateCollector
from assistcheck.application.resolution.request_parser import RequestParser
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.enums import FailureKind
from assistcheck.domain.model.failure import ValidationFailure
from assistcheck.domain.model.injection_request import InjectionRequest

if TYPE_CHECKING:
    from assistcheck.domain.model.elements import TypeDecl
    from assistcheck.domain.ports.code_emitter import CodeEmitterPort
    from assistcheck.domain.ports.diagnostic_sink import DiagnosticSink
    from assistcheck.domain.ports.symbol_model import SymbolModel

logger = logging.getLogger(__name__)


class RoundState(Enum):
    """Processing round state."""

    IDLE = auto()
    COLLECTING = auto()
    VALIDATING = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of one processing round.

    Attributes:
        candidates: Candidates validated, in processing order
        requests: Requests that passed validation (emitted or not)
        failures: Per-candidate failures (validation and INTERNAL emission errors)
        emitted: Qualified names of candidates whose emission succeeded
    """

    candidates: tuple[TypeDecl, ...] = ()
    requests: tuple[InjectionRequest, ...] = ()
    failures: tuple[ValidationFailure, ...] = ()
    emitted: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        """No failures: every candidate was valid and emitted."""
        return not self.failures


class AssistedInjectProcessor:
    """Validates assisted-injection declarations and emits factories.

    Dependencies are explicit and scoped to the processor instance; nothing
    is global. Create one processor per output target and call process()
    once per round.

    Example:
        sink = CollectingSink()
        processor = AssistedInjectProcessor(sink, PythonFactoryEmitter(MemorySourceWriter()))
        processor.process(model)
        assert not sink.has_errors
    """

    def __init__(
        self,
        sink: DiagnosticSink,
        emitter: CodeEmitterPort,
        config: ProcessorConfig | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            sink: Receives every reported diagnostic
            emitter: Consumes validated requests
            config: Marker configuration. Uses defaults if None.
        """
        if sink is None:
            raise TypeError("sink must not be None")
        if emitter is None:
            raise TypeError("emitter must not be None")

        self._sink = sink
        self._emitter = emitter
        self._config = config or ProcessorConfig()
        self._state = RoundState.IDLE
        self._last_result: RoundResult | None = None

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def last_result(self) -> RoundResult | None:
        """Result of the most recent round, None before the first one."""
        return self._last_result

    def process(self, model: SymbolModel) -> bool:
        """Run one round.

        Returns:
            Always False: the markers are not claimed, other processors may
            observe them too.
        """
        self.run_round(model)
        return False

    def run_round(self, model: SymbolModel) -> RoundResult:
        """Run one round and return its outcome.

        Args:
            model: Immutable symbol snapshot for this round

        Returns:
            RoundResult with requests, failures and emitted candidates
        """
        self._state = RoundState.COLLECTING
        candidates = CandidateCollector(model, self._config, self._sink).collect()

        self._state = RoundState.VALIDATING
        parser = RequestParser(model, self._config)
        requests: list[InjectionRequest] = []
        failures: list[ValidationFailure] = []
        emitted: list[str] = []

        for candidate in candidates:
            match self._parse(parser, candidate):
                case ValidationFailure() as failure:
                    logger.debug("%s rejected: %s", candidate.qualified_name, failure.kind.name)
                    failures.append(failure)
                    self._sink.report(failure.to_diagnostic())
                case InjectionRequest() as request:
                    requests.append(request)
                    if failure := self._emit(candidate, request):
                        failures.append(failure)
                        self._sink.report(failure.to_diagnostic())
                    else:
                        emitted.append(candidate.qualified_name)

        self._state = RoundState.DONE
        self._last_result = RoundResult(
            candidates=candidates,
            requests=tuple(requests),
            failures=tuple(failures),
            emitted=tuple(emitted),
        )
        logger.info(
            "round done: %d candidate(s), %d emitted, %d failure(s)",
            len(candidates),
            len(emitted),
            len(failures),
        )
        return self._last_result

    def _parse(
        self,
        parser: RequestParser,
        candidate: TypeDecl,
    ) -> InjectionRequest | ValidationFailure:
        """Validate candidate; any exception becomes an INTERNAL failure."""
        try:
            return parser.parse(candidate)
        except Exception as e:
            logger.exception("validation failed for %s", candidate.qualified_name)
            return ValidationFailure(FailureKind.INTERNAL, f"Uncaught error: {e}", candidate)

    def _emit(self, candidate: TypeDecl, request: InjectionRequest) -> ValidationFailure | None:
        """Hand request to the emitter; any exception becomes an INTERNAL failure."""
        try:
            self._emitter.emit(request)
        except Exception as e:
            logger.exception("emission failed for %s", candidate.qualified_name)
            return ValidationFailure(FailureKind.INTERNAL, f"Uncaught error: {e}", candidate)
        return None
