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
"""exactnum package for exact integer and rational arithmetic

BigInteger and Rational are immutable values. Independent or shared
instances can be used from several threads at once. The process-wide
multiplication options (set_multiplication_options) are plain module
state and must not be changed while other threads compute.
"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .exceptions import ExactNumError, ParseError, DomainError, PrecisionError
from .sign import Sign
from .multiplication import set_multiplication_options, get_multiplication_options
from .big_integer import BigInteger
from .gcd import gcd
from .rational import Rational
from .operations import (NumberOperations, BigIntegerOperations, RationalOperations, read_big_integer, read_rational,
                         write_number)
