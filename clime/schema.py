"""The schema side of clime: static descriptions of what a command
expects on its command line. Definitions are built once per command,
validated at construction, and never modified by parsing.
"""

from boltons.iterutils import unique
from boltons.funcutils import format_exp_repr

from clime.casting import get_param_type
from clime.utils import process_definition_name, process_flag_char


class ParamDefinition(object):
    """A single positional parameter. Position in the schema's sequence
    of ParamDefinitions is significant.

    Args:
       name (str): Name of the parameter, used in error messages.
       type: The declared type of the argument, see
          :func:`~clime.casting.get_param_type`. Defaults to string.
       default: The value used when the argument is not passed.
          Defaults to None.
       required (bool): Whether the argument must be passed. Only
          consulted when the Schema derives its required count.
       description (str): A summary for help rendering.
    """
    def __init__(self, name, type=None, default=None, required=False,
                 description=None):
        self.name = process_definition_name(name, 'parameter')
        self.type = get_param_type(type)
        self.default = default
        self.required = bool(required)
        self.description = description

    def __repr__(self):
        return format_exp_repr(self, ['name'], opt_names=['type', 'default', 'required'],
                               opt_key=lambda v: v is None or v is False)


class ParamsDefinition(object):
    """The variadic tail of the positional parameters, collecting every
    argument left once the ParamDefinitions are filled. A schema may
    have at most one.

    Args:
       name (str): Name of the parameters, used in error messages.
       type: The declared type of each element. Defaults to string.
       required (bool): Pass True to require at least one element.
       default: Kept for help rendering. Unused by the parser, which
          produces an empty list when no elements are passed.
       description (str): A summary for help rendering.
    """
    def __init__(self, name, type=None, required=False, default=None,
                 description=None):
        self.name = process_definition_name(name, 'parameters')
        self.type = get_param_type(type)
        self.required = bool(required)
        self.default = default
        self.description = description

    def __repr__(self):
        return format_exp_repr(self, ['name'], opt_names=['type', 'required', 'default'],
                               opt_key=lambda v: v is None or v is False)


class OptionDefinition(object):
    """A named option, passed as ``--name value`` or ``-f value``, or a
    toggle, passed as ``--name`` or ``-f``.

    Args:
       name (str): The canonical long name of the option. Two leading
          dashes are allowed and stripped.
       flag (str): An optional single-character shortcut, optionally
          prefixed with a dash.
       type: The declared type of the option's value. Defaults to
          string. Ignored for toggles.
       required (bool): Pass True to fail the parse when the option is
          not passed.
       toggle (bool): Pass True for an option taking no value. Toggles
          are True when passed and False otherwise.
       default: The value used when the option is not passed.
       placeholder (str): Name of the value in help rendering.
       description (str): A summary for help rendering.
    """
    def __init__(self, name, flag=None, type=None, required=False,
                 toggle=False, default=None, placeholder=None,
                 description=None):
        self.name = process_definition_name(name, 'option')
        self.flag = process_flag_char(flag) if flag else None
        self.type = get_param_type(type)
        self.required = bool(required)
        self.toggle = bool(toggle)
        if self.toggle and default not in (None, False):
            raise ValueError('toggle options always default to False,'
                             ' expected no default for %r, not: %r'
                             % (self.name, default))
        self.default = False if self.toggle else default
        self.placeholder = placeholder
        self.description = description

    def __repr__(self):
        return format_exp_repr(self, ['name'],
                               opt_names=['flag', 'type', 'required', 'toggle', 'default'],
                               opt_key=lambda v: v is None or v is False)


class Schema(object):
    """Everything an :class:`~clime.parser.ArgsParser` needs to know
    about a command's arguments.

    Args:
       params (list): ParamDefinitions, in positional order.
       variadic (ParamsDefinition): The optional variadic tail.
       options (list): OptionDefinitions.
       required_count (int): How many of the leading *params* must be
          passed. Defaults to None, which counts the leading
          ParamDefinitions marked as required.

    Schema instances are stateless and safe to share between parsers.
    """
    def __init__(self, params=None, variadic=None, options=None,
                 required_count=None):
        self.params = tuple(params or ())
        for param in self.params:
            if not isinstance(param, ParamDefinition):
                raise TypeError('expected ParamDefinition, not: %r' % (param,))
        param_names = [p.name for p in self.params]
        if len(unique(param_names)) != len(param_names):
            raise ValueError('duplicate parameter names in: %r' % param_names)

        if variadic is not None and not isinstance(variadic, ParamsDefinition):
            raise TypeError('expected ParamsDefinition or None for variadic,'
                            ' not: %r' % (variadic,))
        self.variadic = variadic

        self.options = tuple(options or ())
        seen_flags = {}
        seen_names = set()
        for option in self.options:
            if not isinstance(option, OptionDefinition):
                raise TypeError('expected OptionDefinition, not: %r' % (option,))
            if option.name in seen_names:
                raise ValueError('duplicate definition for option name: %r' % option.name)
            seen_names.add(option.name)
            if option.flag is None:
                continue
            if option.flag in seen_flags:
                raise ValueError('conflicting flag %r for options %r and %r'
                                 % (option.flag, seen_flags[option.flag], option.name))
            seen_flags[option.flag] = option.name

        if required_count is None:
            required_count = self._count_required()
        required_count = int(required_count)
        if not 0 <= required_count <= len(self.params):
            raise ValueError('expected required_count between 0 and %s, not: %r'
                             % (len(self.params), required_count))
        self.required_count = required_count

    def _count_required(self):
        count = 0
        for param in self.params:
            if not param.required:
                break
            count += 1
        trailing = [p.name for p in self.params[count:] if p.required]
        if trailing:
            raise ValueError('required parameters must precede optional ones,'
                             ' got required after optional: %r' % trailing)
        return count

    @property
    def required_params(self):
        return self.params[:self.required_count]

    def __repr__(self):
        return format_exp_repr(self, [], opt_names=['params', 'variadic', 'options', 'required_count'],
                               opt_key=lambda v: not v)
