"""
Diagnostics for recoverable anomalies.

Unsupported fills and styles whose node is missing do not stop an export;
they are reported to a :class:`DiagnosticsSink` handed to the normalizer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger("figtokens.diagnostics")


class DiagnosticKind(StrEnum):
    """Kinds of recoverable anomalies."""

    UNSUPPORTED_FILL = "unsupported_fill"
    MISSING_NODE = "missing_node"
    MISSING_FILL = "missing_fill"
    MISSING_TEXT_STYLE = "missing_text_style"


@dataclass(frozen=True)
class Diagnostic:
    """A single recorded anomaly."""

    kind: DiagnosticKind
    style_name: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind}] {self.style_name}: {self.message}"


class DiagnosticsSink(Protocol):
    """Anything that accepts diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None: ...


@dataclass
class DiagnosticsCollector:
    """Sink that only records; used by tests and the validate command."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def __len__(self) -> int:
        return len(self.diagnostics)


@dataclass
class LoggingDiagnostics(DiagnosticsCollector):
    """Default sink: records and forwards to the diagnostics logger."""

    def report(self, diagnostic: Diagnostic) -> None:
        super().report(diagnostic)
        if diagnostic.kind == DiagnosticKind.MISSING_NODE:
            logger.debug("%s", diagnostic)
        else:
            logger.info("%s", diagnostic)
