#===============================================================================
# PACKAGE sjfsim
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Discrete-event simulation of a single-server queue with Shortest-Job-First
# scheduling.
#===============================================================================
from sjfsim.core import SimError
from sjfsim.simulation import (Simulation, SimulationParameters,
                               SimulationResult)

__version__ = '1.0.0'
__all__ = ['SimError', 'Simulation', 'SimulationParameters',
           'SimulationResult']
