# -*- coding: utf-8 -*-
"""
grn_netlist.exceptions
~~~~~~~~~~~~~~~~~~~~~~

Errors raised while converting a document to a netlist. Any of these means
no netlist was produced.
"""


class ConversionError(Exception):
    """Unable to convert a document."""


class MappingError(ConversionError):
    """An interaction cannot be mapped onto a single netlist node."""
