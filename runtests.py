#!/usr/bin/env python
import runpy
import os

# ensure full tracebacks are available in test mode
os.environ['ESCAPETIME_DEVELOPER_MODE'] = '1'


if __name__ == "__main__":
    runpy.run_module('escapetime.runtests', run_name='__main__')
