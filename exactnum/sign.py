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
"""Sign of a BigInteger or Rational value"""

from enum import Enum


class Sign(Enum):
    """Two-valued multiplicative sign.

    Members order NEGATIVE < POSITIVE, which is the first key when ordering
    signed values.
    """
    POSITIVE = 1
    NEGATIVE = -1

    @staticmethod
    def combine(a: 'Sign', b: 'Sign') -> 'Sign':
        """Sign of a product or quotient: equal signs give POSITIVE."""
        return Sign.POSITIVE if a is b else Sign.NEGATIVE

    @staticmethod
    def of(value: int) -> 'Sign':
        return Sign.NEGATIVE if value < 0 else Sign.POSITIVE

    def negate(self) -> 'Sign':
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def __lt__(self, other):
        if isinstance(other, Sign):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Sign):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Sign):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Sign):
            return self.value >= other.value
        return NotImplemented

    def __str__(self):
        return '-' if self is Sign.NEGATIVE else '+'
