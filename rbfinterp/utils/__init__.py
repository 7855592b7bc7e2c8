"""Miscellaneous utility functions"""

from .general_utils import to_list, get_first_defined, freeze, parse_points, parse_point, parse_values
