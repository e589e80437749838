#===============================================================================
# MODULE simrandom
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Defines the VariateGenerator class, which produces the integer exponential
# variates (interarrival and service times) that drive a simulation run.
#
# We use NumPy's random module for uniform random number generation, via
# the PCG64DXSM bit generator. The bit generator is seeded with the
# client-supplied seed; independent replications are obtained by jumping
# that seeded bit generator once per run number beyond the first (run 1 uses
# the seeded generator as is, run n is n-1 jumps ahead). jumped() advances
# the state by 2**127 steps, so the streams of different runs do not overlap
# for any practical run length.
#
# Exponential variates are generated by inversion rather than via
# Generator.exponential(), since the simulation depends on the exact
# transformation:
#
#     duration = ceil(-(SCALE * mean) * ln(1 - u)),  u uniform in [0, 1)
#
# The mean is scaled by SCALE (100) before the ceiling is applied, so that
# integer ticks have enough resolution; reported means are divided by SCALE
# again (see stats.py). Generator.random() never returns 1.0, so ln(0) cannot
# occur. It can return exactly 0.0, which would produce a zero-length
# duration; such draws are discarded and redrawn so every duration is
# strictly positive.
#===============================================================================
__all__ = ['VariateGenerator', 'SCALE']

import math
from numbers import Integral, Real
import numpy as np

from sjfsim.core.simexception import SimError
from sjfsim.core.simlogging import SimLogging

logger = SimLogging.get_logger(__name__)

# Scaling factor applied to mean times before rounding up to integer ticks
SCALE = 100

_RNG_INITIALIZATION_ERROR = "Random Number Generator Initialization Error"
_RAND_PARAMETER_ERROR = "Invalid Pseudo-Random Distribution Parameter(s)"


class VariateGenerator(object):
    """
    Produces exponentially distributed integer durations from a seeded
    uniform pseudo-random source. Each instance owns its own generator
    state; two instances created with the same seed and run number
    produce identical sequences.

    :param seed:       Seed for the underlying bit generator
    :type seed:        `int` >= 0

    :param run_number: Replication run number; selects an independent
                       stream derived from the seed. Defaults to 1.
    :type run_number:  `int` >= 1

    """
    __slots__ = ('_seed', '_run_number', '_rng')

    def __init__(self, seed, run_number=1):
        if not isinstance(seed, Integral) or seed < 0:
            msg = "Seed ({0}) must be a non-negative integer"
            raise SimError(_RNG_INITIALIZATION_ERROR, msg, seed)
        if not isinstance(run_number, Integral) or run_number <= 0:
            msg = "Requested run number ({0}) must be greater than zero"
            raise SimError(_RNG_INITIALIZATION_ERROR, msg, run_number)

        self._seed = int(seed)
        self._run_number = int(run_number)

        bit_generator = np.random.PCG64DXSM(seed=self._seed)
        if run_number > 1:
            bit_generator = bit_generator.jumped(run_number - 1)
        self._rng = np.random.Generator(bit_generator)
        logger.debug("Initialized random number generator: seed %d, run %d",
                     self._seed, self._run_number)

    @property
    def seed(self):
        return self._seed

    @property
    def run_number(self):
        return self._run_number

    def uniform(self):
        """
        Return the next uniform draw from the half-open interval [0, 1).

        :rtype: `float`
        """
        return float(self._rng.random())

    def draw_exponential(self, mean):
        """
        Return an exponentially distributed duration, in clock ticks, for a
        passed mean expressed in (unscaled) time units. The returned value
        is always a positive integer.

        :param mean: The mean of the exponential distribution
        :type mean:  positive `float` or `int`

        :return:     ceil(-SCALE * mean * ln(1 - u))
        :rtype:      `int`

        """
        if not isinstance(mean, Real) or not mean > 0 or math.isinf(mean):
            msg = "Exponential Distribution: mean ({0}) must be a positive number"
            raise SimError(_RAND_PARAMETER_ERROR, msg, mean)

        scaled_mean = mean * SCALE
        u = self.uniform()
        while u == 0.0:
            u = self.uniform()
        return int(math.ceil(-scaled_mean * math.log(1.0 - u)))
