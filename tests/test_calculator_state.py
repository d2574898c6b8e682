import math

import pytest

from demoapps.calculator_state import Calculator, Operator


def test_new_calculator_shows_zero():
    calc = Calculator()
    assert calc.display_value == "0"
    assert calc.formatted_display() == "0"
    assert calc.operator is None


def test_digits_append():
    calc = Calculator()
    for digit in (1, 2, 3):
        calc.input_digit(digit)
    assert calc.display_value == "123"


def test_leading_zero_is_replaced():
    calc = Calculator()
    calc.input_digit(0)
    calc.input_digit(5)
    assert calc.display_value == "5"


def test_set_operator_waits_for_operand():
    calc = Calculator(display_value="12")
    calc.set_operator(Operator.ADD)
    assert calc.cur_val == 12.0
    assert calc.waiting_for_operand
    calc.input_digit(3)
    assert calc.display_value == "3"
    assert not calc.waiting_for_operand


def test_multiplication():
    calc = Calculator(display_value="6")
    calc.set_operator(Operator.MUL)
    calc.input_digit(7)
    calc.perform_operation()
    assert float(calc.display_value) == 6 * 7
    assert calc.cur_val == 6 * 7
    assert calc.operator is None


def test_integer_result_has_no_fraction():
    calc = Calculator(display_value="6")
    calc.set_operator(Operator.ADD)
    calc.input_digit(4)
    calc.perform_operation()
    assert calc.display_value == str(6 + 4)


def test_perform_without_operator_changes_nothing():
    calc = Calculator(display_value="9")
    calc.perform_operation()
    assert calc == Calculator(display_value="9")


def test_division_by_zero_shows_infinity():
    calc = Calculator(display_value="5")
    calc.set_operator(Operator.DIV)
    calc.input_digit(0)
    calc.perform_operation()
    assert float(calc.display_value) == math.inf
    assert calc.cur_val == math.inf


def test_dot_is_added_once():
    calc = Calculator()
    calc.input_dot()
    calc.input_dot()
    assert calc.display_value == "0."
    assert calc.display_value.count(".") == 1


def test_toggle_sign_round_trip():
    calc = Calculator(display_value="42")
    calc.toggle_sign()
    assert calc.display_value == "-42"
    calc.toggle_sign()
    assert calc.display_value == "42"


def test_toggle_percent():
    calc = Calculator(display_value="50")
    calc.toggle_percent()
    assert calc.display_value == "0.5"


def test_formatted_display_groups_thousands():
    assert Calculator(display_value="1234567").formatted_display() == "1,234,567"


def test_formatted_display_negative_fraction():
    assert Calculator(display_value="-1234.5").formatted_display() == "-1,234.5"


def test_backspace_keeps_lone_zero():
    calc = Calculator()
    calc.backspace()
    assert calc.display_value == "0"


def test_backspace_removes_last_char():
    calc = Calculator(display_value="12")
    calc.backspace()
    assert calc.display_value == "1"


def test_backspace_to_empty_breaks_display():
    calc = Calculator(display_value="5")
    calc.backspace()
    assert calc.display_value == ""
    with pytest.raises(ValueError):
        calc.formatted_display()


def test_clear_display():
    calc = Calculator(display_value="987")
    calc.clear_display()
    assert calc.display_value == "0"


def test_handle_key_digits_and_backspace():
    calc = Calculator()
    for key in ("4", "2", "Backspace"):
        calc.handle_key(key)
    assert calc.display_value == "4"


def test_handle_key_operator_only_sets_operator():
    calc = Calculator(display_value="8")
    calc.handle_key("*")
    assert calc.operator is Operator.MUL
    assert not calc.waiting_for_operand
    assert calc.cur_val == 0.0
    assert calc.display_value == "8"


def test_handle_key_ignores_unknown():
    calc = Calculator(display_value="3")
    calc.handle_key("x")
    calc.handle_key("Enter")
    assert calc == Calculator(display_value="3")