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
"""Static numbers and option keys used in the exactnum package

    Digit store

        RADIX_DIGITS = 4

        RADIX = 10000

        DECIMAL_DIGITS = '0123456789'

    Conversions

        FLOAT_CONVERSION_DIGITS = 30

    Multiplication options

        MULTIPLICATION = 'multiplication'

        AUTO = 'auto'

        FFT = 'fft'

        SCHOOLBOOK = 'schoolbook'

        SCHOOLBOOK_CUTOFF = 'schoolbook_cutoff'

        FFT_ERROR_BUDGET = 2.0**47
"""

RADIX_DIGITS = 4
RADIX = 10**RADIX_DIGITS
DECIMAL_DIGITS = '0123456789'

FLOAT_CONVERSION_DIGITS = 30

MULTIPLICATION = 'multiplication'
AUTO = 'auto'
FFT = 'fft'
SCHOOLBOOK = 'schoolbook'
MULTIPLICATION_METHODS = (AUTO, FFT, SCHOOLBOOK)
SCHOOLBOOK_CUTOFF = 'schoolbook_cutoff'
DEFAULT_SCHOOLBOOK_CUTOFF = 32

# float64 carries 53 mantissa bits; the rest is headroom for transform rounding
FFT_ERROR_BUDGET = 2.0**47
