"""CheckService — bulk validation of newline-delimited candidate CUSIPs.

Every line is parsed independently.  Valid identifiers count as good; any
failure counts as bad.  In fix mode, lines whose only defect is the check
digit are repaired and written out, every other bad line is omitted.

INVARIANT: The tally lives here, never in the domain layer.  Each run owns
its own CheckTally; parallel workers merge theirs afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from cusiptool.config.models import CheckConfig
from cusiptool.domain import Identifier, IncorrectCheckDigit, parse, repair
from cusiptool.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


@dataclass
class CheckTally:
    """Running counts for one check run."""

    good: int = 0
    bad: int = 0
    fixed: int = 0

    @property
    def total(self) -> int:
        return self.good + self.bad

    @property
    def omitted(self) -> int:
        return self.bad - self.fixed

    def merge(self, other: CheckTally) -> CheckTally:
        """Combine two tallies (e.g. from separate workers) into a new one."""
        return CheckTally(
            good=self.good + other.good,
            bad=self.bad + other.bad,
            fixed=self.fixed + other.fixed,
        )

    def summary(self, *, fix: bool) -> str:
        """The one-line human summary printed at the end of a run."""
        line = f"Read {self.total} values; {self.good} were valid CUSIPs and {self.bad} were not."
        if fix:
            line += f" Fixed {self.fixed}; Omitted {self.omitted}."
        return line

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "good": self.good,
            "bad": self.bad,
            "fixed": self.fixed,
            "omitted": self.omitted,
        }


def _discard(_text: str) -> None:
    return None


class CheckService:
    """Validate (and optionally repair) a stream of candidate CUSIPs.

    Usage::

        svc = CheckService(settings.check)
        result = svc.run(lines, fix=True, emit=click.echo, report=err_echo)
    """

    def __init__(self, config: CheckConfig | None = None) -> None:
        self._config = config or CheckConfig()

    def _prepare(self, raw: str) -> str:
        line = raw.removesuffix("\n").removesuffix("\r")
        if self._config.strip_whitespace:
            line = line.strip()
        return line

    def check_line(
        self,
        line: str,
        tally: CheckTally,
        *,
        fix_mode: bool,
        emit: Sink,
        report: Sink,
    ) -> None:
        """Parse one line, update *tally* and route its output."""
        outcome = parse(line)

        if isinstance(outcome, Identifier):
            tally.good += 1
            if fix_mode:
                emit(str(outcome))
            return

        tally.bad += 1
        if fix_mode and isinstance(outcome, IncorrectCheckDigit):
            repaired = repair(outcome.payload)
            tally.fixed += 1
            logger.debug("Repaired %s -> %s", line, repaired)
            emit(str(repaired))
            return

        logger.debug("Rejected %r: %s", line, outcome.kind)
        if self._config.report_invalid:
            report(f"Input: {line}; Error: {outcome.message}")

    def run(
        self,
        lines: Iterable[str],
        *,
        fix: bool | None = None,
        emit: Sink = _discard,
        report: Sink = _discard,
    ) -> ServiceResult:
        """Check every line and return the run summary.

        Args:
            lines: Candidate identifiers, one per item; a trailing newline
                is removed.
            fix: Repair check-digit errors and emit every good or repaired
                identifier through *emit*.  Defaults to ``[check] fix``.
            emit: Sink for identifiers (fix mode only).
            report: Sink for per-line diagnostics.

        The result is ok when no irrecoverable bad inputs remain.
        """
        fix_mode = self._config.fix if fix is None else fix
        tally = CheckTally()

        for raw in lines:
            line = self._prepare(raw)
            if not line and self._config.skip_blank:
                continue
            self.check_line(line, tally, fix_mode=fix_mode, emit=emit, report=report)

        summary = tally.summary(fix=fix_mode)
        data = {**tally.to_dict(), "fix": fix_mode, "summary": summary}

        logger.info(
            "Check complete: total=%d good=%d bad=%d fixed=%d fix=%s",
            tally.total,
            tally.good,
            tally.bad,
            tally.fixed,
            fix_mode,
        )

        if tally.omitted:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                error=ServiceError(code="INVALID_INPUT", message=summary, detail=tally.to_dict()),
            )
        return ServiceResult(ok=True, op="check", data=data)
