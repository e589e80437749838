import unittest

from sjfsim.test import configuration_test
from sjfsim.test import simclock_test
from sjfsim.test import simlogging_test
from sjfsim.test import stats_test
from sjfsim.test import simrandom_test
from sjfsim.test import simevent_test
from sjfsim.test import readyqueue_test
from sjfsim.test import simulation_test
from sjfsim.test import sjf_theory_test
from sjfsim.test import simulate_test

from sjfsim.core.simlogging import SimLogging
import logging

def run_tests():
    SimLogging.set_level(logging.CRITICAL)

    suite = unittest.TestSuite()

    suite.addTest(configuration_test.makeTestSuite())
    suite.addTest(simclock_test.makeTestSuite())
    suite.addTest(simlogging_test.makeTestSuite())
    suite.addTest(stats_test.makeTestSuite())
    suite.addTest(simrandom_test.makeTestSuite())
    suite.addTest(simevent_test.makeTestSuite())
    suite.addTest(readyqueue_test.makeTestSuite())
    suite.addTest(simulation_test.makeTestSuite())
    suite.addTest(sjf_theory_test.makeTestSuite())
    suite.addTest(simulate_test.makeTestSuite())

    unittest.TextTestRunner(verbosity=1).run(suite)

if __name__ == "__main__":
    # guard execution in if __name__ block to avoid multiprocessing errors
    # from replication tests
    run_tests()
