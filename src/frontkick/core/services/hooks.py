"""Optional callbacks for UI layers (progress, warnings).

Services call these instead of printing, so the same flow can run under the
Rich CLI, in tests, or silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class PipelineHooks:
    step: Callable[[str], None] | None = None
    done: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None

    def emit_step(self, message: str) -> None:
        if self.step:
            self.step(message)

    def emit_done(self, message: str) -> None:
        if self.done:
            self.done(message)

    def emit_warning(self, message: str) -> None:
        if self.warning:
            self.warning(message)
