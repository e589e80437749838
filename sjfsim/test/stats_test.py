#===============================================================================
# MODULE stats_test
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Unit tests for the ResponseTimeStats class and scaled_mean()
#===============================================================================
import math
from sjfsim.core import ResponseTimeStats, SimError
from sjfsim.core.stats import scaled_mean

import unittest


class ResponseTimeStatsTests(unittest.TestCase):
    "Tests for ResponseTimeStats"
    def setUp(self):
        self.stats = ResponseTimeStats()

    def testInitial(self):
        "Test: new stats have zero total and count"
        self.assertEqual(self.stats.total, 0)
        self.assertEqual(self.stats.count, 0)

    def testAdd(self):
        "Test: add() accumulates total and count"
        for rt in (100, 90, 150):
            self.stats.add(rt)
        self.assertEqual(self.stats.total, 340)
        self.assertEqual(self.stats.count, 3)

    def testAddZero(self):
        "Test: a zero response time is counted"
        self.stats.add(0)
        self.assertEqual(self.stats.count, 1)

    def testAddNegative(self):
        "Test: a negative response time raises and is not recorded"
        self.assertRaises(SimError, self.stats.add, -1)
        self.assertEqual(self.stats.count, 0)


class ScaledMeanTests(unittest.TestCase):
    "Tests for scaled_mean()"
    def testMean(self):
        "Test: scaled mean is total / (100 * count)"
        self.assertAlmostEqual(scaled_mean(1250, 4), 3.125)

    def testNoCount(self):
        "Test: scaled mean with a count of zero is NaN"
        self.assertTrue(math.isnan(scaled_mean(0, 0)))


def makeTestSuite():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    suite.addTest(loader.loadTestsFromTestCase(ResponseTimeStatsTests))
    suite.addTest(loader.loadTestsFromTestCase(ScaledMeanTests))
    return suite

if __name__ == '__main__':
    unittest.main()
