#===============================================================================
# MODULE simclock_test
#
# Copyright (C) 2024 Howard Klein - All Rights Reserved
#
# Unit tests for class SimClock
#===============================================================================
from sjfsim.core import *

import unittest

class simclockTests( unittest.TestCase ):
    "Tests for class simclock"
    def setUp( self ):
        self.clock = SimClock()

    def testNow( self ):
        "Test: now()is initially zero"
        self.assertEqual( self.clock.now(), 0 )

    def testAdvance1( self ):
        "Test: advance from zero to 10"
        self.clock.advance_to( 10 )
        self.assertEqual( self.clock.now(), 10 )

    def testAdvance2( self ):
        "Test: advance from 10 to 120"
        self.clock.advance_to( 10 )
        self.clock.advance_to( 120 )
        self.assertEqual( self.clock.now(), 120 )

    def testAdvance3( self ):
        "Test: advance from 120 to 10 raises simexception.SimError"
        self.clock.advance_to( 120 )
        self.assertRaises( simexception.SimError, self.clock.advance_to, 10 )

    def testAdvance4( self ):
        "Test: advance_to() with float parameter raises simexception.SimError"
        self.assertRaises( simexception.SimError, self.clock.advance_to, 5.0 )

    def testAdvanceSameTime( self ):
        "Test: advance to the current time is allowed"
        self.clock.advance_to( 50 )
        self.clock.advance_to( 50 )
        self.assertEqual( self.clock.now(), 50 )

    def testIndependentClocks( self ):
        "Test: advancing one clock does not affect another"
        other = SimClock()
        self.clock.advance_to( 75 )
        self.assertEqual( other.now(), 0 )

def makeTestSuite():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    suite.addTest(loader.loadTestsFromTestCase( simclockTests ))
    return suite

if __name__ == '__main__':
    unittest.main()
