"""InspectService — parse one literal and derive every view of it.

Pure and single-shot: nothing is cached between calls. Parse failures come
back as a failed ServiceResult carrying the error code, the offending input
and the accepted literal forms.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from numview.config.settings import NumviewSettings
from numview.domain.errors import NumberParseError
from numview.domain.facts import derive_facts
from numview.domain.parsing import parse
from numview.services.result import ServiceResult
from numview.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

OP = "inspect"

ACCEPTED_FORMS: tuple[str, ...] = (
    "decimal (42)",
    "float (3.14, 1e-3, inf, nan)",
    "binary (0b1010)",
    "octal (0o52)",
    "hex (0x2a)",
)

OVERFLOW_WARNING = "Decimal literal exceeds the signed 64-bit range; shown as a float"


class InspectService:
    """Classify a literal and bundle its derived facts.

    Usage::

        result = InspectService(settings).inspect("0x2a")
        result.data["kind"]    # "integer"
        result.data["facts"]   # radix forms, bits, meter, ...
    """

    def __init__(self, settings: NumviewSettings | None = None) -> None:
        self._settings = settings or NumviewSettings()

    @traced
    def inspect(self, raw: str | None = None) -> ServiceResult:
        """Inspect *raw*, or the configured default literal when it is None."""
        literal = raw if raw is not None else self._settings.inspect.default_literal

        with trace_span("parse") as span:
            try:
                parsed = parse(literal)
            except NumberParseError as exc:
                logger.debug("Rejected %r: %s", literal, exc)
                return ServiceResult.failure(
                    OP,
                    exc.code,
                    f"Could not parse '{literal}': {exc}",
                    detail={
                        "input": literal,
                        **exc.detail,
                        "accepted_forms": list(ACCEPTED_FORMS),
                    },
                )
            if span is not None:
                span.annotate("kind", str(parsed.value.kind))

        display = self._settings.display
        with trace_span("derive"):
            facts = derive_facts(
                parsed.value,
                set_glyph=display.bit_set_glyph,
                clear_glyph=display.bit_clear_glyph,
            )

        warnings: list[str] = []
        if parsed.overflowed_to_float:
            warnings.append(OVERFLOW_WARNING)

        return ServiceResult.success(
            OP,
            {
                "input": literal,
                "kind": str(parsed.value.kind),
                "base": parsed.base,
                "value": parsed.value.value,
                "facts": asdict(facts),
            },
            warnings,
        )
