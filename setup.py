import sys

from setuptools import find_packages, setup


min_python_version = "3.8"
min_numpy_run_version = "1.22"
min_numba_version = "0.57"
min_llvmlite_version = "0.40"


def _guard_py_ver():
    cur_py = sys.version_info[:2]
    min_py = tuple(int(x) for x in min_python_version.split('.'))
    if cur_py < min_py:
        msg = ('Cannot install on Python version {}; only versions >={} '
               'are supported.')
        raise RuntimeError(msg.format('.'.join(map(str, cur_py)),
                                      min_python_version))


_guard_py_ver()


def _get_version():
    with open('escapetime/__init__.py') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip("'\"")
    raise RuntimeError("unable to find __version__")


packages = find_packages(include=["escapetime", "escapetime.*"])

install_requires = [
    'llvmlite >={}'.format(min_llvmlite_version),
    'numba >={}'.format(min_numba_version),
    'numpy >={}'.format(min_numpy_run_version),
]

extras_require = {
    # file based config (.escapetime_config.yaml)
    'yaml': ['pyyaml'],
    'test': ['pytest', 'pyyaml'],
}

metadata = dict(
    name='escapetime',
    description="escape-time evaluation of the Mandelbrot set",
    version=_get_version(),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    entry_points={
        "console_scripts": ["escapetime = escapetime.entry:main"],
    },
    packages=packages,
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">={}".format(min_python_version),
    license="BSD",
)

with open('README.rst') as f:
    metadata['long_description'] = f.read()

setup(**metadata)
