"""Check the docstring examples of py_measure modules.

Every module is checked with preferred units restored to their defaults,
so a `pymeasure.toml` found near the working directory does not change the
expected output of `to_preferred()` examples.

Usage (run from repo root):
        - python scripts/run_doctest.py
        - python scripts/run_doctest.py -m unit dimensions -v

Prints one `<module> <failed>/<attempted>` line per module and exits with
code 1 if any example fails or any module can't be imported.
"""

import argparse
import doctest
import importlib
import pathlib
import pkgutil
from typing import List, Optional, Sequence

PACKAGE = 'py_measure'


def discover_modules() -> List[str]:
    root = pathlib.Path(__file__).resolve().parents[1] / PACKAGE
    return sorted(info.name for info in pkgutil.iter_modules([str(root)]) if not info.ispkg)


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("run_doctest", description=f"Run {PACKAGE} docstring examples")
    p.add_argument("-m", "--module", nargs="+", dest="modules", default=None,
                   help="Module names without the package prefix (default: all modules)")
    p.add_argument("-v", "--verbose", action="store_true", help="Report every example")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = get_parser().parse_args(argv)
    preferred_units = importlib.import_module(f'{PACKAGE}.dimensions').PreferredUnits

    failed = attempted = broken = 0
    for short_name in ns.modules or discover_modules():
        name = f'{PACKAGE}.{short_name}'
        try:
            module = importlib.import_module(name)
        except ImportError as e:
            print(f'{name} import error: {e}')
            broken += 1
            continue
        preferred_units.restore_defaults()
        result = doctest.testmod(module, optionflags=doctest.ELLIPSIS, verbose=ns.verbose)
        print(f'{name} {result.failed}/{result.attempted}')
        failed += result.failed
        attempted += result.attempted

    print(f'total {failed}/{attempted}, {broken} not imported')
    return int(failed > 0 or broken > 0)


if __name__ == '__main__':
    raise SystemExit(main())
