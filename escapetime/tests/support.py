"""
Assorted utilities for use in tests.
"""

import contextlib
import io
import os
import sys
import unittest

import numpy as np

from escapetime import config


class TestCase(unittest.TestCase):

    longMessage = True

    # A random state yielding the same random numbers for any test case.
    # Use as `self.random.<method name>`
    @property
    def random(self):
        try:
            return self._random
        except AttributeError:
            self._random = np.random.RandomState(42)
            return self._random

    def assertEscapesAt(self, result, i):
        self.assertIsNotNone(result, "expected an escape at %d" % i)
        self.assertIsInstance(result, int)
        self.assertEqual(result, i)

    def assertInconclusive(self, result):
        self.assertIsNone(result, "expected an inconclusive result")


# Various helpers

@contextlib.contextmanager
def override_config(name, value):
    """
    Return a context manager that temporarily sets escapetime config
    variable *name* to *value*.  *name* must be the name of an existing
    variable in escapetime.config.
    """
    old_value = getattr(config, name)
    setattr(config, name, value)
    try:
        yield
    finally:
        setattr(config, name, old_value)


@contextlib.contextmanager
def override_env_config(name, value):
    """
    Return a context manager that temporarily sets an escapetime config
    environment *name* to *value*.
    """
    old = os.environ.get(name)
    os.environ[name] = value
    config.reload_config()

    try:
        yield
    finally:
        if old is None:
            # If it wasn't set originally, delete the environ var
            del os.environ[name]
        else:
            # Otherwise, restore to the old value
            os.environ[name] = old
        # Always reload config
        config.reload_config()


@contextlib.contextmanager
def captured_output(stream_name):
    """Return a context manager used by captured_stdout/stderr
    that temporarily replaces the sys stream *stream_name* with a StringIO."""
    orig_stdout = getattr(sys, stream_name)
    setattr(sys, stream_name, io.StringIO())
    try:
        yield getattr(sys, stream_name)
    finally:
        setattr(sys, stream_name, orig_stdout)


def captured_stdout():
    """Capture the output of sys.stdout:

       with captured_stdout() as stdout:
           print("hello")
       self.assertEqual(stdout.getvalue(), "hello\\n")
    """
    return captured_output("stdout")


def captured_stderr():
    """Capture the output of sys.stderr."""
    return captured_output("stderr")
