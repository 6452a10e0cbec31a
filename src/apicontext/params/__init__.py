r"""Declarative request parameters and their URL encoding."""

from __future__ import annotations

__all__ = [
    "DataclassParameterSource",
    "EntryListParameterSource",
    "MappingParameterSource",
    "ParameterEntry",
    "ParameterMapping",
    "ParameterSource",
    "RequestParameter",
    "create_request_parameter",
    "encode_parameters",
    "parameter",
    "to_parameter_source",
]

from apicontext.params.encoder import create_request_parameter, encode_parameters
from apicontext.params.entry import ParameterEntry
from apicontext.params.fields import ParameterMapping, parameter
from apicontext.params.sources import (
    DataclassParameterSource,
    EntryListParameterSource,
    MappingParameterSource,
    ParameterSource,
    RequestParameter,
    to_parameter_source,
)
