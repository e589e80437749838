#===============================================================================
# MODULE sjf_theory_test
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Unit tests for the sjf_theory module
#===============================================================================
import io
from sjfsim.core import SimError
from sjfsim.models import sjf_theory

import unittest


class FCFSTheoryTests(unittest.TestCase):
    "Tests for the M/M/1 FCFS expectation"
    def testFCFS(self):
        "Test: FCFS response time for means 5 and 3 is 7.5"
        self.assertAlmostEqual(sjf_theory.mm1_fcfs_response_time(5.0, 3.0), 7.5)

    def testFCFSLightLoad(self):
        "Test: FCFS response time approaches the mean service time at light load"
        self.assertAlmostEqual(sjf_theory.mm1_fcfs_response_time(1000.0, 1.0),
                               1.0, places=2)


class SJFTheoryTests(unittest.TestCase):
    "Tests for the M/M/1 non-preemptive SJF expectation"
    def testSJFBelowFCFS(self):
        "Test: SJF response time is less than FCFS response time"
        for ia, svc in ((5.0, 3.0), (2.0, 1.8), (10.0, 2.0)):
            self.assertLess(sjf_theory.mm1_sjf_response_time(ia, svc),
                            sjf_theory.mm1_fcfs_response_time(ia, svc))

    def testSJFAboveServiceTime(self):
        "Test: SJF response time exceeds the mean service time"
        self.assertGreater(sjf_theory.mm1_sjf_response_time(5.0, 3.0), 3.0)

    def testSJFLightLoad(self):
        "Test: SJF response time approaches the mean service time at light load"
        self.assertAlmostEqual(sjf_theory.mm1_sjf_response_time(1000.0, 1.0),
                               1.0, places=2)

    def testSJFResidualWork(self):
        "Test: at light load the SJF wait approaches lambda * E[S^2] / 2"
        # lambda = 0.001, E[S^2] = 2: the wait lies between 0.001 (empty
        # system) and the FCFS wait 0.001 / 0.999
        response = sjf_theory.mm1_sjf_response_time(1000.0, 1.0)
        self.assertGreaterEqual(response, 1.001 - 1e-9)
        self.assertLessEqual(response, 1.0 + 0.001 / 0.999 + 1e-9)

    def testUnstable(self):
        "Test: utilization of one or more raises"
        self.assertRaises(SimError, sjf_theory.mm1_sjf_response_time, 3.0, 3.0)
        self.assertRaises(SimError, sjf_theory.mm1_fcfs_response_time, 2.0, 3.0)

    def testNonPositiveMean(self):
        "Test: a non-positive mean raises"
        self.assertRaises(SimError, sjf_theory.theory_results, 0.0, 3.0)

    def testTheoryResults(self):
        "Test: theory_results() includes utilization and both response times"
        results = sjf_theory.theory_results(5.0, 3.0)
        self.assertAlmostEqual(results['utilization'], 0.6)
        self.assertAlmostEqual(results['fcfs_response_time'], 7.5)
        self.assertLess(results['sjf_response_time'], 7.5)

    def testPrint(self):
        "Test: print_theory_results() reports the expected response times"
        out = io.StringIO()
        sjf_theory.print_theory_results(5.0, 3.0, out)
        text = out.getvalue()
        self.assertIn('Expected SJF Response Time', text)
        self.assertIn('Expected FCFS Response Time', text)
        self.assertIn('rho (utilization)', text)


def makeTestSuite():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    suite.addTest(loader.loadTestsFromTestCase(FCFSTheoryTests))
    suite.addTest(loader.loadTestsFromTestCase(SJFTheoryTests))
    return suite

if __name__ == '__main__':
    unittest.main()
