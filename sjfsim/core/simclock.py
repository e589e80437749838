#===============================================================================
# MODULE simclock
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the SimClock class, the integer tick clock of a single simulation
# run. Each Simulation owns its own clock, so that multiple runs can coexist
# in one process.
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
__all__ = ['SimClock']

from numbers import Integral
from sjfsim.core.simexception import SimError


class SimClock(object):
    """
    A simulation clock measured in integer ticks. The clock starts at zero
    and may only move forward; it is advanced by the simulation driver
    when an event is removed from the timeline, and never by anything else.
    """
    __slots__ = ('_currentTime',)

    def __init__(self):
        self._currentTime = 0

    def now(self):
        """
        :return: The current simulated clock time
        :rtype:  `int`
        """
        return self._currentTime

    def advance_to(self, newTime):
        """
        Advance the clock to the specified new time, which must be an integer
        greater than or equal to the current time.
        """
        if not isinstance(newTime, Integral):
            errMsg = "Clock time {0} is not an integer"
            raise SimError('InvalidClockAdvance', errMsg, newTime)
        if newTime >= self._currentTime:
            self._currentTime = int(newTime)
        else:
            errMsg = "Attempt to advance clock from {0} to {1}"
            raise SimError('InvalidClockAdvance', errMsg, self._currentTime, newTime)

    def __str__(self):
        return 'SimClock(' + str(self._currentTime) + ')'
