"""JSON Schema Builder

A fluent, immutable builder for JSON Schema documents. Builders are
composed through chained calls; the resulting plain dict is handed to a
validation engine. SchemaValidator wires the jsonschema library to the
registry of custom predicates.
"""

__version__ = "1.0.0"

from .array import ArraySchema
from .base import BaseSchema
from .config import BuilderConfig, Config, EngineConfig, OutputConfig
from .engine import SchemaValidator
from .exceptions import (
    RegistryKeyCollisionError,
    SchemaBuilderError,
    SchemaLoadError,
    SchemaValidationError,
)
from .factory import S, SchemaFactory
from .function import FunctionSchema
from .merge import KEYWORD_RULES, MergeRule, merge_node
from .numeric import NumericSchema
from .object import ObjectSchema
from .registry import DataContext, ValidatorRegistry, default_registry
from .string import StringSchema
from .utils import (
    merge_multiple_schemas,
    merge_schemas,
    omit,
    omit_from_schema,
    pick,
    pick_from_schema,
)

Schema = BaseSchema | StringSchema | NumericSchema | ArraySchema | ObjectSchema | FunctionSchema

__all__ = [
    "S",
    "SchemaFactory",
    "Schema",
    "BaseSchema",
    "StringSchema",
    "NumericSchema",
    "ArraySchema",
    "ObjectSchema",
    "FunctionSchema",
    "SchemaValidator",
    "ValidatorRegistry",
    "DataContext",
    "default_registry",
    "BuilderConfig",
    "EngineConfig",
    "OutputConfig",
    "Config",
    "MergeRule",
    "KEYWORD_RULES",
    "merge_node",
    "merge_schemas",
    "merge_multiple_schemas",
    "pick",
    "omit",
    "pick_from_schema",
    "omit_from_schema",
    "SchemaBuilderError",
    "RegistryKeyCollisionError",
    "SchemaValidationError",
    "SchemaLoadError",
]
