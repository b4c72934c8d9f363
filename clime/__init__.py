
from clime.errors import ClimeException, UsageError

from clime.casting import (STRING,
                           NUMBER,
                           BOOLEAN,
                           Custom,
                           ParamType,
                           cast_argument,
                           get_param_type)

from clime.schema import (Schema,
                          ParamDefinition,
                          ParamsDefinition,
                          OptionDefinition)

from clime.parser import ArgsParser, ParseContext, ParsedResult
from clime.utils import is_valid_command_name
