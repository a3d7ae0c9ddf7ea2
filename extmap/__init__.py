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

from . import common
from .version import __version__

from .common.errors import KeyNotFoundError
from .collections import (
    ExtendedMap,
    OrderedSet,
    TryGetResult,
    intersection,
    union,
    difference,
    symmetric_difference,
    is_subset_of,
    is_superset_of,
    is_disjoint_from,
    where_key,
    where_value,
    to_dict,
    is_empty,
    try_get,
    key_view,
    value_view,
)
