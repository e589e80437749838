#===============================================================================
# MODULE stats
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the ResponseTimeStats class, the running response time accumulator
# of a simulation run.
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#===============================================================================
__all__ = ['ResponseTimeStats', 'scaled_mean']

from sjfsim.core.simexception import SimError
from sjfsim.core.simrandom import SCALE

_NAN = float('nan')
_ERROR_NAME = "Stats Error"


def scaled_mean(total, count):
    """
    Return total / (SCALE * count), the mean of count values accumulated
    in scaled clock ticks, expressed in unscaled time units. NaN if count
    is zero.
    """
    if count == 0:
        return _NAN
    return total / (SCALE * float(count))


class ResponseTimeStats(object):
    """
    Accumulates the response times (in clock ticks) of departed customers.
    Response times are summed as integers, so the accumulated total is
    exact and two runs with the same inputs agree bit for bit.
    """
    __slots__ = ('_total', '_count')

    def __init__(self):
        self._total = 0
        self._count = 0

    def add(self, response_time):
        """
        Record one departed customer's response time.
        """
        if response_time < 0:
            msg = "Negative response time ({0})"
            raise SimError(_ERROR_NAME, msg, response_time)
        self._total += response_time
        self._count += 1

    @property
    def total(self):
        """
        Accumulated response time, in clock ticks
        """
        return self._total

    @property
    def count(self):
        """
        Number of completed customers
        """
        return self._count
