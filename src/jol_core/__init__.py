"""jol_core — class-coercing collections and structural-key dictionaries."""

import logging

from .coerce import to_inst, to_inst_compat, to_inst_opt
from .colls import Arr, ClsArr, ClsDict, ClsMap, ClsSet, Dict
from .config import Config, get_config, override_config, set_config
from .eqdict import EqDict
from .errors import (
    ArgumentCountError,
    JolError,
    KeyConflictError,
    TypeMismatchError,
    show,
)
from .fields import Obj, assign
from .keys import from_key, stabilize, to_key
from .model import FieldMap, Normalizable, Undefined
from .predicates import (
    is_composite,
    is_exact_instance,
    is_instance,
    is_nil,
    is_plain,
    is_record,
    is_sequence,
    is_some,
    is_struct_like,
)
from .que import Que

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Arr",
    "ClsArr",
    "ClsDict",
    "ClsMap",
    "ClsSet",
    "Dict",
    "EqDict",
    "Obj",
    "Que",
    "Undefined",
    "Normalizable",
    "FieldMap",
    "assign",
    "to_inst",
    "to_inst_compat",
    "to_inst_opt",
    "to_key",
    "from_key",
    "stabilize",
    "is_nil",
    "is_some",
    "is_composite",
    "is_record",
    "is_sequence",
    "is_struct_like",
    "is_instance",
    "is_exact_instance",
    "is_plain",
    "Config",
    "get_config",
    "set_config",
    "override_config",
    "JolError",
    "ArgumentCountError",
    "TypeMismatchError",
    "KeyConflictError",
    "show",
]
