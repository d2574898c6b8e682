"""Calculator whose whole state lives in one object driven by key presses."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from demoapps.calculator import _apply, _format_number, _parse_float


class Operator(Enum):
    """Binary operators on the keypad."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


_KEY_OPERATORS = {op.value: op for op in Operator}


@dataclass
class Calculator:
    """Display text, pending operator and accumulated value of a calculator."""

    display_value: str = "0"
    operator: Operator | None = None
    waiting_for_operand: bool = False
    cur_val: float = 0.0

    def formatted_display(self) -> str:
        """The display value with thousands separators in its integer part."""
        text = _format_number(_parse_float(self.display_value))
        sign, digits = ("-", text[1:]) if text.startswith("-") else ("", text)
        whole, dot, fraction = digits.partition(".")
        if not whole.isdigit():
            return text
        return f"{sign}{int(whole):,}{dot}{fraction}"

    def clear_display(self) -> None:
        self.display_value = "0"

    def input_digit(self, digit: int) -> None:
        content = str(digit)
        if self.waiting_for_operand or self.display_value == "0":
            self.waiting_for_operand = False
            self.display_value = content
        else:
            self.display_value += content

    def input_dot(self) -> None:
        if "." not in self.display_value:
            self.display_value += "."

    def perform_operation(self) -> None:
        """Apply the pending operator to the stored value and the display."""
        if self.operator is None:
            return
        rhs = _parse_float(self.display_value)
        new_val = _apply(self.operator.value, self.cur_val, rhs)
        self.cur_val = new_val
        self.display_value = _format_number(new_val)
        self.operator = None

    def toggle_sign(self) -> None:
        if self.display_value.startswith("-"):
            self.display_value = self.display_value.lstrip("-")
        else:
            self.display_value = f"-{self.display_value}"

    def toggle_percent(self) -> None:
        self.display_value = _format_number(_parse_float(self.display_value) / 100.0)

    def backspace(self) -> None:
        if self.display_value != "0":
            self.display_value = self.display_value[:-1]

    def set_operator(self, operator: Operator) -> None:
        self.operator = operator
        self.cur_val = _parse_float(self.display_value)
        self.waiting_for_operand = True

    def handle_key(self, key: str) -> None:
        """React to a key name: ``Backspace``, a digit or an operator symbol."""
        if key == "Backspace":
            self.backspace()
        elif len(key) == 1 and key in string.digits:
            self.input_digit(int(key))
        elif key in _KEY_OPERATORS:
            self.operator = _KEY_OPERATORS[key]