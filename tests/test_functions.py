import math

import pytest

from math_parser import (
    AngleUnit, EvaluationConfig, DEFAULT_CONFIG, FUNCTION_REGISTRY,
    UnknownFunctionError, ArityMismatchError, available_functions
)
from math_parser.expression_tree import lookup_function, check_call_arity

DEGREES = EvaluationConfig(AngleUnit.DEGREES)
RADIANS = EvaluationConfig(AngleUnit.RADIANS)


def call(name, *values, config=DEFAULT_CONFIG):
    return lookup_function(name)(list(values), config)


def test_registry_contents():
    assert available_functions() == sorted([
        "sin", "cos", "tan", "arcsin", "arccos", "arctan", "sqrt", "rad",
        "log", "ln", "avg", "min", "max", "med", "factorial", "ceil", "floor", "int",
    ])


def test_default_config_uses_degrees():
    assert DEFAULT_CONFIG.angle_unit is AngleUnit.DEGREES
    assert DEFAULT_CONFIG.uses_degrees


def test_trig_in_radians():
    assert call("sin", 54, config=RADIANS) == pytest.approx(math.sin(54))
    assert call("cos", 2, config=RADIANS) == pytest.approx(math.cos(2))
    assert call("tan", 5, config=RADIANS) == pytest.approx(math.tan(5))


def test_trig_in_degrees():
    assert call("sin", 180, config=DEGREES) == pytest.approx(0.0, abs=1e-12)
    assert call("cos", 60, config=DEGREES) == pytest.approx(0.5)
    assert call("tan", 45, config=DEGREES) == pytest.approx(1.0)


def test_inverse_trig():
    assert call("arcsin", 0, config=RADIANS) == 0
    assert call("arccos", 0, config=RADIANS) == pytest.approx(math.acos(0))
    assert call("arctan", 325, config=RADIANS) == pytest.approx(math.atan(325))
    assert call("arcsin", 1, config=DEGREES) == pytest.approx(90.0)
    assert call("arctan", 1, config=DEGREES) == pytest.approx(45.0)


def test_inverse_trig_outside_domain_is_nan():
    assert math.isnan(call("arcsin", 2))


def test_roots():
    assert call("sqrt", 9.3) == pytest.approx(math.sqrt(9.3))
    assert call("rad", 27, 3) == pytest.approx(3)
    assert math.isnan(call("sqrt", -1))
    assert math.isnan(call("rad", -8, 3))


def test_log_is_natural_and_ln_is_base_two():
    assert call("log", 425) == pytest.approx(math.log(425))
    assert call("log", 1) == 0
    assert call("ln", 636) == pytest.approx(math.log2(636))
    assert call("log", 0) == -math.inf
    assert math.isnan(call("log", -1))


def test_aggregates():
    assert call("avg", 100, 100, 100, 100) == 100
    assert call("avg", 104) == 104
    assert call("min", 5, 25, 25, 0, -52) == -52
    assert call("max", 259, math.sqrt(525)) == 259


@pytest.mark.parametrize("values", [[1.0], [1.0, 2.0], [3.5, -2.0, 10.0, 0.25, 7.0]])
def test_avg_is_sum_over_count(values):
    assert call("avg", *values) == pytest.approx(sum(values) / len(values))


def test_median_parity():
    assert call("med", 1240, -431, 20) == 20
    assert call("med", -42, 0, 40, 35245) == 20
    assert call("med", 7) == 7


def test_factorial():
    assert call("factorial", 4) == 24
    assert call("factorial", 4.9) == 24
    assert call("factorial", 0) == 1
    assert call("factorial", -3) == 1
    assert call("factorial", 1000) == math.inf
    assert math.isnan(call("factorial", math.nan))


def test_rounding():
    assert call("ceil", 30.3) == 31
    assert call("floor", 45.9) == 45
    assert call("int", 3445.242) == 3445
    assert call("int", -2.7) == -2
    assert isinstance(call("int", 2.5), float)


def test_lookup_unknown_function():
    with pytest.raises(UnknownFunctionError):
        lookup_function("foo")


def test_arity_specs():
    assert FUNCTION_REGISTRY["avg"].is_variadic
    assert FUNCTION_REGISTRY["avg"].accepts(1)
    assert FUNCTION_REGISTRY["avg"].accepts(50)
    assert not FUNCTION_REGISTRY["avg"].accepts(0)
    assert FUNCTION_REGISTRY["rad"].accepts(2)
    assert not FUNCTION_REGISTRY["rad"].accepts(3)


def test_check_call_arity():
    assert check_call_arity("rad", 2).name == "rad"
    with pytest.raises(ArityMismatchError) as exc_info:
        check_call_arity("med", 0)
    assert exc_info.value.variadic
    assert "at least 1" in str(exc_info.value)


def test_config_is_immutable():
    radians = DEFAULT_CONFIG.with_angle_unit(AngleUnit.RADIANS)
    assert radians.angle_unit is AngleUnit.RADIANS
    assert DEFAULT_CONFIG.angle_unit is AngleUnit.DEGREES
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.angle_unit = AngleUnit.RADIANS


def test_angle_unit_from_name():
    assert AngleUnit.from_name("Radians") is AngleUnit.RADIANS
    assert AngleUnit.from_name(" degrees ") is AngleUnit.DEGREES
    with pytest.raises(ValueError):
        AngleUnit.from_name("gradians")
