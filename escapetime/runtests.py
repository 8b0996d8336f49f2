
def _main(argv, **kwds):
    from escapetime.testing import run_tests
    # This helper function assumes the first element of argv
    # is the name of the calling program.
    return run_tests(argv, defaultTest='escapetime.tests',
                     **kwds).wasSuccessful()


def main(*argv, **kwds):
    return _main(['<main>'] + list(argv), **kwds)


if __name__ == '__main__':
    import sys
    sys.exit(0 if _main(sys.argv) else 1)
