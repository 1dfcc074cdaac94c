"""fextension
=================

Generic helpers over plain callables: selector-based equality and ordering, an
orderable wrapper, callback-driven sequence walks and multicast fan-out.
"""

from . import config
from .comparable import Comparable, as_comparables, sort_by
from .errors import FExtensionError, InvalidArgumentError, InvalidCastError
from .functional import for_each, for_each_indexed, for_indexed, increment, stride
from .multicast import Multicast, invoke_all
from .selectors import compare_selected, compare_selected_to_value, is_equal, is_equal_to_value

__all__ = [
    "config",
    "Comparable",
    "as_comparables",
    "sort_by",
    "FExtensionError",
    "InvalidArgumentError",
    "InvalidCastError",
    "for_each",
    "for_each_indexed",
    "for_indexed",
    "increment",
    "stride",
    "Multicast",
    "invoke_all",
    "compare_selected",
    "compare_selected_to_value",
    "is_equal",
    "is_equal_to_value",
]
