"""Tests for IEEE-754 binary64 decomposition."""

import math
import random
import sys

import pytest

from numview.domain.decoration import Role
from numview.domain.floats import (
    EXPONENT_BIAS,
    FIELD_SEPARATOR,
    FloatCategory,
    FloatFields,
    bit_string_64,
    bits_to_float,
    decompose,
    decompose_bits,
    float_facts,
    float_to_bits,
    reconstruct,
    value_form,
)

_EDGE_PATTERNS = [
    0x0000000000000000,
    0x8000000000000000,
    0x0000000000000001,
    0x000FFFFFFFFFFFFF,
    0x0010000000000000,
    0x3FF0000000000000,
    0x7FEFFFFFFFFFFFFF,
    0x7FF0000000000000,
    0xFFF0000000000000,
    0x7FF0000000000001,
    0x7FF8000000000000,
    0xFFFFFFFFFFFFFFFF,
]


def _random_patterns(count: int = 500) -> list[int]:
    rng = random.Random(754)
    return [rng.getrandbits(64) for _ in range(count)]


class TestBits:
    def test_one(self) -> None:
        assert float_to_bits(1.0) == 0x3FF0000000000000

    def test_negative_zero(self) -> None:
        assert float_to_bits(-0.0) == 0x8000000000000000

    def test_round_trip_pattern(self) -> None:
        assert float_to_bits(bits_to_float(0x400921FB54442D18)) == 0x400921FB54442D18


class TestClassification:
    @pytest.mark.parametrize(
        ("value", "category"),
        [
            (0.0, FloatCategory.ZERO),
            (-0.0, FloatCategory.ZERO),
            (5e-324, FloatCategory.SUBNORMAL),
            (sys.float_info.min / 2, FloatCategory.SUBNORMAL),
            (sys.float_info.min, FloatCategory.NORMAL),
            (1.0, FloatCategory.NORMAL),
            (-3.14, FloatCategory.NORMAL),
            (sys.float_info.max, FloatCategory.NORMAL),
            (math.inf, FloatCategory.INFINITY),
            (-math.inf, FloatCategory.INFINITY),
            (math.nan, FloatCategory.NAN),
        ],
    )
    def test_known_values(self, value: float, category: FloatCategory) -> None:
        assert decompose(value).category is category

    @pytest.mark.parametrize("bits", _EDGE_PATTERNS + _random_patterns())
    def test_total_and_exclusive(self, bits: int) -> None:
        fields = decompose_bits(bits)
        exponent_all_zero = fields.biased_exponent == 0
        exponent_all_one = fields.biased_exponent == 0x7FF
        matches = [
            exponent_all_zero and fields.fraction == 0,
            exponent_all_zero and fields.fraction != 0,
            not exponent_all_zero and not exponent_all_one,
            exponent_all_one and fields.fraction == 0,
            exponent_all_one and fields.fraction != 0,
        ]
        assert matches.count(True) == 1
        expected = list(FloatCategory)[matches.index(True)]
        assert fields.category is expected

    @pytest.mark.parametrize("bits", _EDGE_PATTERNS + _random_patterns(50))
    def test_fields_reassemble_pattern(self, bits: int) -> None:
        fields = decompose_bits(bits)
        assert 0 <= fields.biased_exponent <= 2047
        assert 0 <= fields.fraction < 1 << 52
        rebuilt = fields.sign << 63 | fields.biased_exponent << 52 | fields.fraction
        assert rebuilt == bits


class TestExponentAndMantissa:
    def test_normal(self) -> None:
        fields = decompose(3.14)
        assert fields.sign == 0
        assert fields.biased_exponent == 1024
        assert fields.unbiased_exponent == 1
        assert fields.mantissa == pytest.approx(1.57)
        assert fields.frac_value == pytest.approx(0.57)

    def test_subnormal_uses_fixed_exponent(self) -> None:
        fields = decompose(5e-324)
        assert fields.biased_exponent == 0
        assert fields.fraction == 1
        assert fields.unbiased_exponent == -1022
        assert fields.mantissa == 2.0**-52

    @pytest.mark.parametrize("value", [0.0, -0.0, math.inf, -math.inf, math.nan])
    def test_special_values_have_no_exponent(self, value: float) -> None:
        fields = decompose(value)
        assert fields.unbiased_exponent is None
        assert fields.mantissa is None
        assert fields.frac_value is None

    def test_sign_symbol(self) -> None:
        assert decompose(-0.0).sign_symbol == "-"
        assert decompose(0.0).sign_symbol == "+"


class TestReconstruct:
    @pytest.mark.parametrize(
        "bits",
        [
            b
            for b in _EDGE_PATTERNS + _random_patterns(300)
            if decompose_bits(b).category in (FloatCategory.NORMAL, FloatCategory.SUBNORMAL)
        ],
    )
    def test_finite_values_round_trip(self, bits: int) -> None:
        fields = decompose_bits(bits)
        assert reconstruct(fields) == bits_to_float(bits)

    def test_normal_formula(self) -> None:
        f = 1337.25
        fields = decompose(f)
        assert fields.frac_value is not None and fields.unbiased_exponent is not None
        sign = -1 if fields.sign else 1
        assert sign * (1 + fields.frac_value) * 2.0**fields.unbiased_exponent == f

    def test_signed_zero(self) -> None:
        assert math.copysign(1.0, reconstruct(decompose(-0.0))) == -1.0

    def test_infinity_and_nan(self) -> None:
        assert reconstruct(decompose(-math.inf)) == -math.inf
        assert math.isnan(reconstruct(decompose(math.nan)))


class TestValueForm:
    def test_normal(self) -> None:
        assert value_form(decompose(1.0)) == "(-1)⁰ × (1 + 0.000000000000) × 2⁰"
        assert value_form(decompose(-0.375)) == "(-1)¹ × (1 + 0.500000000000) × 2⁻²"

    def test_subnormal(self) -> None:
        assert value_form(decompose(5e-324)) == "(-1)⁰ × (0 + 0.000000000000) × 2⁻¹⁰²²"
        half = bits_to_float(0x0008000000000000)
        assert value_form(decompose(half)) == "(-1)⁰ × (0 + 0.500000000000) × 2⁻¹⁰²²"

    def test_zeros_keep_their_sign(self) -> None:
        assert value_form(decompose(0.0)) == "(-1)⁰ × 0"
        assert value_form(decompose(-0.0)) == "(-1)¹ × 0"

    def test_infinity(self) -> None:
        assert value_form(decompose(-math.inf)) == "(-1)¹ × Infinity"

    def test_nan(self) -> None:
        nan_fields = FloatFields(
            sign=1, biased_exponent=2047, fraction=5, category=FloatCategory.NAN
        )
        assert value_form(nan_fields) == "NaN"


class TestBitString64:
    def test_one(self) -> None:
        sign, exponent, fraction = bit_string_64(float_to_bits(1.0)).split(FIELD_SEPARATOR)
        assert sign == "0"
        assert exponent == "011 1111 1111"
        assert fraction.replace(" ", "") == "0" * 52
        assert fraction.split(" ") == ["0000"] * 13

    def test_all_bits_present(self) -> None:
        bits = 0xC00921FB54442D18
        rendered = bit_string_64(bits)
        digits = rendered.replace(FIELD_SEPARATOR, "").replace(" ", "")
        assert digits == format(bits, "064b")
        assert len(rendered) == 64 + 2 * len(FIELD_SEPARATOR) + 14

    def test_field_roles(self) -> None:
        roles: list[Role] = []

        def record(text: str, role: Role) -> str:
            roles.append(role)
            return text

        bit_string_64(0, record)
        assert roles.count(Role.SIGN_BIT) == 1
        assert roles.count(Role.EXPONENT_BIT) == 11
        assert roles.count(Role.FRACTION_BIT) == 52
        assert roles.count(Role.FIELD_SEPARATOR) == 2


class TestFloatFacts:
    def test_one(self) -> None:
        facts = float_facts(1.0)
        assert facts.text == "1.0"
        assert facts.scientific == "1.000000e+00"
        assert facts.hex_bits == "3ff0000000000000"
        assert facts.sign == "+"
        assert facts.category is FloatCategory.NORMAL
        assert facts.biased_exponent == EXPONENT_BIAS
        assert facts.fraction_hex == "0000000000000"
        assert facts.unbiased_exponent == 0
        assert facts.mantissa == 1.0

    def test_smallest_subnormal(self) -> None:
        facts = float_facts(5e-324)
        assert facts.hex_bits == "0000000000000001"
        assert facts.fraction_hex == "0000000000001"
        assert facts.category is FloatCategory.SUBNORMAL

    def test_negative_zero(self) -> None:
        facts = float_facts(-0.0)
        assert facts.sign == "-"
        assert facts.hex_bits == "8000000000000000"
        assert facts.value_form == "(-1)¹ × 0"

    def test_max_fraction_hex(self) -> None:
        facts = float_facts(bits_to_float(0x000FFFFFFFFFFFFF))
        assert facts.fraction_hex == "fffffffffffff"
