"""Rich renderers for inspection results.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Glyph strings (banner, bits, meter) are re-derived through the domain
functions with :func:`markup_decorator` injected, so styling never leaks
into the plain facts carried by the ServiceResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from numview.domain.decoration import Role
from numview.domain.floats import bit_string_64
from numview.domain.integers import banner, bit_string_32, render_meter
from numview.output.console import create_console, get_output, markup_decorator

if TYPE_CHECKING:
    from rich.console import Console

    from numview.output.formatters import OutputSettings
    from numview.services.result import ServiceResult

PARSE_HINT = "Try plain decimals, floats (3.14, 1e-3, inf, nan) or prefixes 0b / 0o / 0x"

# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, settings: OutputSettings) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) unless ``settings.color`` is set.
    """
    console = create_console(
        no_color=not settings.color,
        force_terminal=True if settings.color else None,
    )

    if result.ok:
        _render_inspection(result, console, settings)
        if settings.verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=settings.verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the value alone."""
    if not result.ok:
        return result.error.message if result.error else "Unknown error"
    if result.data.get("kind") == "float":
        return str(result.data["facts"]["text"])
    return str(result.data.get("value", ""))


# ── Helpers ───────────────────────────────────────────────────────────


def _section(console: Console, title: str, emoji: str) -> None:
    console.print()
    console.print(Text(f"{emoji} {title}", style="nv.heading"))
    console.print(Text("-" * (len(title) + 2), style="nv.underline"))


def _field(console: Console, key: str, value: Any, style: str = "", *, width: int = 8) -> None:
    """Print one aligned ``key : value`` line."""
    console.print(Text(f"{key:<{width}}: ", style="nv.key"), Text(str(value), style=style), sep="")


def _glyph_line(console: Console, markup: str) -> None:
    """Print a pre-decorated glyph string without wrapping it."""
    console.print(markup, soft_wrap=True)


def _render_header(console: Console, data: dict[str, Any]) -> None:
    console.print(Text("✨ Number viewer ✨", style="nv.title"))
    console.print(Text("=" * 12, style="nv.rule"))
    console.print()
    value = data["facts"]["text"] if data["kind"] == "float" else data["value"]
    _field(console, "🎯 Input", data["input"], "nv.input")
    _field(console, "🧾 Value", value, "nv.value")
    _field(console, "🏷️ Kind", data["kind"])


# ── Integer sections ──────────────────────────────────────────────────


def _render_bases(console: Console, n: int, facts: dict[str, Any], s: OutputSettings) -> None:
    radix = facts["radix"]
    _section(console, "Bases", "🔢")
    _field(console, "Decimal", radix["decimal"], "nv.value")
    _field(console, "Hex", radix["hexadecimal"], "nv.hex")
    _field(console, "Octal", radix["octal"], "nv.octal")
    _field(console, "Binary", radix["binary"], "nv.binary")


def _render_base_e(console: Console, n: int, facts: dict[str, Any], s: OutputSettings) -> None:
    _section(console, "Base e flavor", "🧮")
    _field(console, "Scientific (e)", facts["scientific"], "nv.hex", width=14)
    log = facts["log"]
    if log is None:
        console.print("ln(0) is -infinity; sticking with zero here.")
        return
    sign = "-" if log["negative"] else ""
    console.print(
        Text(f"{n} = {sign}"),
        Text(f"{log['mantissa']:.6f}", style="nv.value"),
        Text(" * e^"),
        Text(f"{log['exponent']:.6f}", style="nv.exponent"),
        sep="",
    )
    console.print(Text("ln(|n|) ≈ "), Text(f"{log['ln']:.6f}", style="nv.hex"), sep="")


def _render_banner(console: Console, n: int, facts: dict[str, Any], s: OutputSettings) -> None:
    _section(console, "ASCII digits", "🖼️")
    for row in banner(n, markup_decorator):
        _glyph_line(console, row)


def _render_bits_32(console: Console, n: int, facts: dict[str, Any], s: OutputSettings) -> None:
    _section(console, "Bits (32-bit two's complement view)", "🧠")
    glyphs = {"set_glyph": s.bit_set_glyph, "clear_glyph": s.bit_clear_glyph}
    _glyph_line(console, bit_string_32(n, markup_decorator, **glyphs))
    one = markup_decorator(s.bit_set_glyph, Role.BIT_SET)
    zero = markup_decorator(s.bit_clear_glyph, Role.BIT_CLEAR)
    _glyph_line(console, f"Legend: {one} = 1, {zero} = 0")


def _render_meter(console: Console, n: int, facts: dict[str, Any], s: OutputSettings) -> None:
    _section(console, "Signed meter (relative to i64 range)", "📏")
    _glyph_line(console, render_meter(facts["meter_index"], markup_decorator))


_INTEGER_SECTIONS = {
    "bases": _render_bases,
    "base_e": _render_base_e,
    "banner": _render_banner,
    "bits": _render_bits_32,
    "meter": _render_meter,
}


# ── Float sections ────────────────────────────────────────────────────


def _render_float(console: Console, facts: dict[str, Any]) -> None:
    _section(console, "Float", "🌊")
    _field(console, "Scientific", facts["scientific"], "nv.hex", width=10)
    _field(console, "Raw bits", f"0x{facts['hex_bits']}", "nv.binary", width=10)


def _render_ieee_bits(console: Console, facts: dict[str, Any]) -> None:
    _section(console, "IEEE-754 bits (sign | exponent | fraction)", "🧠")
    _glyph_line(console, bit_string_64(facts["raw_bits"], markup_decorator))


def _render_fields(console: Console, facts: dict[str, Any]) -> None:
    _section(console, "Fields", "🔬")
    unbiased = facts["unbiased_exponent"]
    mantissa = facts["mantissa"]
    frac_value = facts["frac_value"]
    _field(console, "Sign", facts["sign"], "nv.field.sign", width=17)
    _field(console, "Category", facts["category"], width=17)
    _field(console, "Biased exponent", facts["biased_exponent"], "nv.field.exponent", width=17)
    _field(console, "Fraction", f"0x{facts['fraction_hex']}", "nv.field.fraction", width=17)
    _field(
        console,
        "Unbiased exponent",
        "n/a" if unbiased is None else unbiased,
        "nv.exponent",
        width=17,
    )
    if frac_value is not None:
        _field(console, "Fraction value", f"{frac_value:.12f}", width=17)
    if mantissa is not None:
        _field(console, "Mantissa", f"{mantissa:.12f}", "nv.value", width=17)


def _render_value_form(console: Console, facts: dict[str, Any]) -> None:
    _section(console, "Value", "🧾")
    console.print(Text(facts["value_form"], style="nv.value"))


_FLOAT_SECTIONS = {
    "float": _render_float,
    "ieee_bits": _render_ieee_bits,
    "fields": _render_fields,
    "value_form": _render_value_form,
}


# ── Inspection renderer ───────────────────────────────────────────────


def _render_inspection(result: ServiceResult, console: Console, settings: OutputSettings) -> None:
    data = result.data
    facts = data["facts"]
    _render_header(console, data)

    if data["kind"] == "integer":
        n = int(data["value"])
        for name, integer_renderer in _INTEGER_SECTIONS.items():
            if name in settings.sections:
                integer_renderer(console, n, facts, settings)
    else:
        for name, float_renderer in _FLOAT_SECTIONS.items():
            if name in settings.sections:
                float_renderer(console, facts)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=2)
        else:
            console.print(f"  {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 2,
) -> None:
    """Render a hierarchical span tree with timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    line = Text(f"{prefix}{duration:>8.3f}ms  ", style="dim")
    line.append(name)
    annotations = span_data.get("annotations")
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line.append(f"  ({extras})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text(msg, style="nv.error"))
    console.print(Text(PARSE_HINT, style="nv.hint"))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="dim"))
