#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exceptions raised by the exactnum package

Hierarchy:
    ExactNumError
    ├── ParseError      malformed numeric string (also a ValueError)
    └── DomainError     division by zero, zero denominator (also a ZeroDivisionError)
        └── PrecisionError  transform multiplication outside its exact range
"""


class ExactNumError(Exception):
    """Base class of all errors raised by exactnum."""
    pass


class ParseError(ExactNumError, ValueError):
    """A string does not describe a number.

    Raised for empty strings, a lone sign, whitespace and any character that
    is not an ASCII decimal digit.
    """

    def __init__(self, text, reason: str = "not a decimal number"):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class DomainError(ExactNumError, ZeroDivisionError):
    """An operation is undefined for its operands."""
    pass


class PrecisionError(DomainError):
    """Operands are too large for exact float64 transform multiplication."""
    pass
