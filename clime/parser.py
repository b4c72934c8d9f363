
import os
import logging
from types import MappingProxyType
from collections import OrderedDict

from boltons.funcutils import format_nonexp_repr

from clime.casting import cast_argument
from clime.errors import UsageError
from clime.schema import Schema
from clime.utils import format_name_list


log = logging.getLogger(__name__)

HELP_ARGS = frozenset(['-h', '-?', '--help'])


class ParseContext(object):
    """Information about the invocation, made available to custom cast
    functions.

    Args:
       cwd (str): The working directory the command runs in.
       commands (tuple): The command path, e.g., ``('git', 'remote',
          'add')``. The first element is the program name.
    """
    def __init__(self, cwd, commands=()):
        self.cwd = cwd
        self.commands = tuple(commands)

    def __repr__(self):
        return format_nonexp_repr(self, ['cwd', 'commands'])


class ParsedResult(object):
    """The result of :meth:`ArgsParser.parse()`.

    Args:
       args (tuple): Values of the positional parameters, one per
          ParamDefinition, defaults filled in.
       extra_args (tuple): Values collected by the variadic parameter.
       options (OrderedDict): Mapping of option names to values.
       context (ParseContext): The context of the parse.
       help (bool): True if help was requested, in which case nothing
          else was parsed.
       schema (Schema): The schema used to parse.
    """
    def __init__(self, args=(), extra_args=(), options=None, context=None,
                 help=False, schema=None):
        self.args = tuple(args)
        self.extra_args = tuple(extra_args)
        self.options = OrderedDict(options or ())
        self.context = context
        self.help = help
        self.schema = schema

    def get_execute_args(self):
        """The list of arguments a command's handler is called with: the
        positional values, then the list of variadic values if the
        schema has a variadic parameter, then the options mapping if
        the schema has options, and finally the context.
        """
        ret = list(self.args)
        if self.schema is not None and self.schema.variadic is not None:
            ret.append(list(self.extra_args))
        if self.schema is not None and self.schema.options:
            ret.append(dict(self.options))
        ret.append(self.context)
        return ret

    def __repr__(self):
        return format_nonexp_repr(self, ['args', 'extra_args', 'options', 'help'])


class _ParseState(object):
    "Mutable bookkeeping for a single call to ArgsParser.parse()"
    def __init__(self, schema, args, context):
        self.remaining = list(args)
        self.pending_params = list(schema.params)
        self.args = []
        self.extra_args = []
        self.options = OrderedDict()
        self.pending_required = OrderedDict()
        self.context = context

        for opt in schema.options:
            self.options[opt.name] = opt.default
            if opt.required:
                self.pending_required[opt.name] = opt

    def next_arg(self):
        if not self.remaining:
            return None
        return self.remaining.pop(0)


class ArgsParser(object):
    """Parses a command's arguments according to a :class:`Schema`.

    Args:
       help_provider: The object able to render help for the command,
          attached to every :class:`UsageError` raised.
       schema (Schema): The command's parameters and options.

    The lookup tables built at construction are read-only, and each
    parse keeps its own state, so one ArgsParser can parse any number
    of argument lists.
    """
    def __init__(self, help_provider, schema):
        if not isinstance(schema, Schema):
            raise TypeError('expected Schema instance, not: %r' % (schema,))
        self.help_provider = help_provider
        self.schema = schema

        option_map = OrderedDict()
        flag_map = OrderedDict()
        for opt in schema.options:
            option_map[opt.name] = opt
            if opt.flag:
                flag_map[opt.flag] = opt.name
        self.option_map = MappingProxyType(option_map)
        self.flag_map = MappingProxyType(flag_map)

    def parse(self, args, cwd=None, commands=()):
        """Convert the list of strings *args* into a :class:`ParsedResult`.

        Args:
           args (list): The arguments following the command path, e.g.,
              ``sys.argv`` minus the program and subcommand names.
           cwd (str): The working directory, exposed to custom cast
              functions. Defaults to the current working directory.
           commands (tuple): The command path, likewise exposed.

        Raises :class:`UsageError` when *args* don't satisfy the schema.
        A help flag (``-h``, ``-?``, ``--help``) anywhere in *args*
        stops parsing, and the result has *help* set, regardless of any
        other errors.
        """
        if isinstance(args, str):
            raise TypeError('expected list of argument strings, not: %r' % (args,))
        if cwd is None:
            cwd = os.getcwd()
        context = ParseContext(cwd, commands)
        state = _ParseState(self.schema, args, context)

        while state.remaining:
            arg = state.next_arg()

            if arg in HELP_ARGS:
                log.debug('help requested with %r, %s argument(s) left unparsed',
                          arg, len(state.remaining))
                return ParsedResult(context=context, help=True, schema=self.schema)

            if arg[:2] == '--':
                self._consume_toggle_or_option(state, arg[2:])
            elif arg[:1] == '-':
                self._consume_flags(state, arg[1:])
            else:
                self._consume_argument(state, arg)

        self._validate(state)

        return ParsedResult(state.args, state.extra_args, state.options,
                            context=context, schema=self.schema)

    def _error(self, message):
        log.debug('usage error: %s', message)
        return UsageError(self.help_provider, message)

    def _consume_flags(self, state, flags):
        # a lone '-' is an empty group of flags, and so consumes nothing
        for i, flag in enumerate(flags):
            if flag not in self.flag_map:
                raise self._error('Unknown option flag "%s"' % flag)

            name = self.flag_map[flag]
            opt = self.option_map[name]
            state.pending_required.pop(name, None)

            if opt.toggle:
                state.options[name] = True
                continue
            if i != len(flags) - 1:
                raise self._error('Only the last flag in a sequence can refer'
                                  ' to an option instead of a toggle')
            self._consume_option(state, opt)

    def _consume_toggle_or_option(self, state, name):
        opt = self.option_map.get(name)
        if opt is None:
            raise self._error('Unknown option `%s`' % name)

        state.pending_required.pop(name, None)

        if opt.toggle:
            state.options[name] = True
        else:
            self._consume_option(state, opt)

    def _consume_option(self, state, opt):
        arg = state.next_arg()
        if arg is None:
            raise self._error('Expecting value for option `%s`' % opt.name)
        if arg[:1] == '-':
            raise self._error('Expecting a value instead of an option or toggle "%s"'
                              ' for option `%s`' % (arg, opt.name))
        state.options[opt.name] = cast_argument(arg, opt.type, state.context)

    def _consume_argument(self, state, arg):
        if state.pending_params:
            param = state.pending_params.pop(0)
            state.args.append(cast_argument(arg, param.type, state.context))
            return

        variadic = self.schema.variadic
        if variadic is not None:
            state.extra_args.append(cast_argument(arg, variadic.type, state.context))
        else:
            state.extra_args.append(arg)

    def _validate(self, state):
        schema = self.schema

        expecting, got = schema.required_count, len(state.args)
        if got < expecting:
            missing = state.pending_params[:expecting - got]
            raise self._error('Expecting argument(s) %s'
                              % format_name_list([p.name for p in missing]))

        if state.pending_required:
            raise self._error('Missing required option(s) %s'
                              % format_name_list(state.pending_required.keys()))

        for param in state.pending_params:
            state.args.append(param.default)
        state.pending_params = []

        if state.extra_args:
            if schema.variadic is None:
                expecting = len(schema.params)
                got = expecting + len(state.extra_args)
                raise self._error('Expecting %s parameter(s) at most but got %s instead'
                                  % (expecting, got))
        elif schema.variadic is not None and schema.variadic.required:
            raise self._error('Expecting at least one element for variadic'
                              ' parameters `%s`' % schema.variadic.name)

    def __repr__(self):
        return format_nonexp_repr(self, ['schema'])
