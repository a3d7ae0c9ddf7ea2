#  ___________________________________________________________________________
#
#  extmap: Set Algebra for Python Mappings
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import pytest

# Tests without any marker run by default.  Tests carrying other
# markers (e.g. "expensive") run only when selected with "-m".
DEFAULT_MARKER = 'default'


def pytest_configure(config):
    config.addinivalue_line("markers", "default: run when no -m is given")
    config.addinivalue_line("markers", "expensive: slow test, run with -m")


def pytest_collection_modifyitems(items):
    for item in items:
        if not any(item.iter_markers()):
            item.add_marker(getattr(pytest.mark, DEFAULT_MARKER))


def pytest_runtest_setup(item):
    if item.config.getoption('-m'):
        return
    names = {mark.name for mark in item.iter_markers()}
    if DEFAULT_MARKER not in names:
        pytest.skip('only default tests run unless -m is given')
