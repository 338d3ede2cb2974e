# Exzyle Apparatus
# Parameter & Attribute Holders
#
# Copyright (C) 2020  Exzyle <exzyle@protonmail.com>
# Licensed under the GNU General Public License v3 or later; see
# <https://www.gnu.org/licenses/>. This program comes with ABSOLUTELY
# NO WARRANTY.

"""
In-memory holders for named values.

ParameterHolder keeps a flat set of named parameters. AttributeHolder
owns a ParameterHolder and adds attributes partitioned by namespace.
"""

from .attributes import DEFAULT_NAMESPACE, AttributeHolder
from .errors import MergeSourceError
from .parameters import ParameterHolder

__all__ = [
    "AttributeHolder",
    "DEFAULT_NAMESPACE",
    "MergeSourceError",
    "ParameterHolder",
]
