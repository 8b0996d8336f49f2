import os
import sys
import traceback
import unittest
from fnmatch import fnmatch
from os.path import abspath, dirname, join, isfile, relpath, normpath, splitext

# directory holding the escapetime package
_TOP_LEVEL_DIR = dirname(dirname(dirname(abspath(__file__))))


def load_testsuite(loader, dir):
    """Find tests in 'dir'."""
    try:
        suite = unittest.TestSuite()
        files = []
        for f in os.listdir(dir):
            path = join(dir, f)
            if isfile(path) and fnmatch(f, 'test_*.py'):
                files.append(f)
        for f in sorted(files):
            # turn 'f' into a filename relative to the toplevel dir...
            f = relpath(join(abspath(dir), f), _TOP_LEVEL_DIR)
            # ...and translate it to a module name.
            f = splitext(normpath(f.replace(os.path.sep, '.')))[0]
            suite.addTests(loader.loadTestsFromName(f))
        return suite
    except Exception:
        traceback.print_exc(file=sys.stderr)
        sys.exit(-1)


def run_tests(argv=None, defaultTest='escapetime.tests', verbosity=1):
    """
    Run the test suite named *defaultTest* (the whole escapetime suite by
    default) and return the TestResult object.
    """
    if argv is None:
        argv = ['escapetime']
    prog = unittest.main(module=None, argv=argv, defaultTest=defaultTest,
                         exit=False, verbosity=verbosity)
    return prog.result
