#===============================================================================
# MODULE simlogging_test
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Unit tests for the SimLogging and NullLogger classes
#===============================================================================
import logging
from sjfsim.core.simlogging import SimLogging, NullLogger

import unittest


class SimLoggingTests(unittest.TestCase):
    "Tests for SimLogging static methods"
    def setUp(self):
        self.savedLevel = SimLogging.get_level()

    def tearDown(self):
        SimLogging.set_level(self.savedLevel)

    def testPackageLoggerName(self):
        "Test: a package module logger keeps its module name"
        logger = SimLogging.get_logger('sjfsim.simulation')
        self.assertEqual(logger.name, 'sjfsim.simulation')

    def testOtherLoggerName(self):
        "Test: a non-package logger is placed below the sjfsim logger"
        logger = SimLogging.get_logger('mymodel')
        self.assertEqual(logger.name, 'sjfsim.mymodel')

    def testSetLevel(self):
        "Test: set_level() changes the level reported by get_level()"
        SimLogging.set_level(logging.DEBUG)
        self.assertEqual(SimLogging.get_level(), logging.DEBUG)

    def testModuleLoggerInheritsLevel(self):
        "Test: module loggers inherit the base logger level"
        SimLogging.set_level(logging.ERROR)
        logger = SimLogging.get_logger('sjfsim.simulation')
        self.assertFalse(logger.isEnabledFor(logging.WARNING))
        self.assertTrue(logger.isEnabledFor(logging.ERROR))


class NullLoggerTests(unittest.TestCase):
    "Tests for NullLogger"
    def testCallsDoNothing(self):
        "Test: logging calls on a NullLogger return the NullLogger"
        nl = NullLogger()
        self.assertIs(nl.debug("Interarrival time for customer is %d", 5), nl)
        self.assertIs(nl.error("aborted"), nl)

    def testSetAttributeIgnored(self):
        "Test: setting an attribute on a NullLogger is ignored"
        nl = NullLogger()
        nl.level = logging.DEBUG
        self.assertIs(nl.level, nl)


def makeTestSuite():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    suite.addTest(loader.loadTestsFromTestCase(SimLoggingTests))
    suite.addTest(loader.loadTestsFromTestCase(NullLoggerTests))
    return suite

if __name__ == '__main__':
    unittest.main()
