"""
Common test configuration for all test subdirectories.
Put here only those things that can not be done through command line options.
"""

import os
import sys

# add tests dir to sys path in order to get access to the 'fixtures' module.
this_source_dir = os.path.dirname(os.path.realpath(__file__))
sys.path.append(this_source_dir)
