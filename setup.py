# #!/usr/bin/env python

"""setup.py script for py_measure library"""

import warnings

from setuptools import setup
from mypyc.build import mypycify

from distutils import ccompiler
from distutils.errors import DistutilsError


def check_compiler():
    try:
        comp = ccompiler.new_compiler(dry_run=True)
        comp.compile([])
        return True
    except DistutilsError as err:
        warnings.warn(f"Can't compile c-extension due to: {err}")
        warnings.warn("Continue installation in pure python mode")
        return False


setup(
    # Only the converters are hot enough to benefit from compilation;
    # unit.py relies on dataclass/__init_subclass__ machinery mypyc doesn't handle.
    ext_modules=mypycify(
        [
            'py_measure/converter.py',
        ],
    ) if check_compiler() else None
)
