"""Conversion of raw command-line text into typed values.

Every parameter and option carries a type descriptor, one of the
builtin tags (:data:`STRING`, :data:`NUMBER`, :data:`BOOLEAN`) or a
:class:`Custom` wrapping a cast function. Casting is deliberately
permissive: text that doesn't look like a number becomes NaN, and a
declared type that isn't recognized yields None. Neither is an error.
"""

import re
import math


_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+\Z")
_ALNUM_RE = re.compile(r"^[0-9A-Za-z]+\Z")
_PREFIXED_INT_BASES = {'0x': 16, '0o': 8, '0b': 2}
_INFINITY_MAP = {'Infinity': math.inf,
                 '+Infinity': math.inf,
                 '-Infinity': -math.inf}


class ParamType(object):
    """Base type descriptor. *kind* is the tag used to dispatch casting,
    one of 'string', 'number', 'boolean', or 'custom'.
    """
    kind = None

    def __init__(self, kind):
        self.kind = kind

    def __repr__(self):
        return '%s' % self.kind.upper()


STRING = ParamType('string')
NUMBER = ParamType('number')
BOOLEAN = ParamType('boolean')

_BUILTIN_TYPE_MAP = {str: STRING,
                     int: NUMBER,
                     float: NUMBER,
                     bool: BOOLEAN}


class Custom(ParamType):
    """A type descriptor for values that know how to build themselves
    from text. *cast_func* is called with the raw argument text and the
    :class:`ParseContext` of the current parse, and whatever it returns
    is used as the value.

    Exceptions raised by *cast_func* are not caught.
    """
    def __init__(self, cast_func, name=None):
        if not callable(cast_func):
            raise TypeError('expected callable for cast_func, not: %r' % (cast_func,))
        super(Custom, self).__init__('custom')
        self.cast_func = cast_func
        self.name = name or getattr(cast_func, '__name__', None) or repr(cast_func)

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%s)' % (cn, self.name)


def is_string_castable(obj):
    "True if *obj* provides a ``cast(text, context)`` method"
    if isinstance(obj, ParamType):
        return False
    return callable(getattr(obj, 'cast', None))


def get_param_type(obj):
    """Normalize a declared type to a type descriptor.

    * None and ``str`` become :data:`STRING`
    * ``int`` and ``float`` become :data:`NUMBER`
    * ``bool`` becomes :data:`BOOLEAN`
    * objects with a ``cast(text, context)`` method, and plain
      functions accepting the same two arguments, are wrapped in
      :class:`Custom`

    Anything else, including classes without ``cast()``, is returned
    unchanged, and will cast to None.
    """
    if obj is None:
        return STRING
    if isinstance(obj, ParamType):
        return obj
    try:
        return _BUILTIN_TYPE_MAP[obj]
    except (KeyError, TypeError):
        pass
    if is_string_castable(obj):
        return Custom(obj.cast, name=getattr(obj, '__name__', None))
    if isinstance(obj, type):
        # classes without cast() are constructors, not cast functions
        return obj
    if callable(obj):
        return Custom(obj)
    return obj


def to_number(text):
    """Numeric coercion with the leniency of a shell-friendly CLI:
    surrounding whitespace is ignored, blank text is zero, and
    ``0x``/``0o``/``0b`` prefixes are honored. Integer text gives an
    int, other numbers give a float. Text that isn't numeric gives NaN
    instead of raising.

    >>> to_number(' 42 ')
    42
    >>> to_number('1e3')
    1000.0
    >>> math.isnan(to_number('forty-two'))
    True
    """
    text = text.strip()
    if not text:
        return 0
    base = _PREFIXED_INT_BASES.get(text[:2].lower())
    if base is not None:
        if not _ALNUM_RE.match(text[2:]):
            return math.nan
        try:
            return int(text[2:], base)
        except ValueError:
            return math.nan
    if text in _INFINITY_MAP:
        return _INFINITY_MAP[text]
    if _INTEGER_RE.match(text):
        return int(text)
    if _DECIMAL_RE.match(text):
        return float(text)
    return math.nan


def to_boolean(text):
    """"false" in any case is False. Otherwise the text is read as a
    number, which is False if it's zero. Text that isn't a number at
    all is True.
    """
    if text.lower() == 'false':
        return False
    num = to_number(text)
    if math.isnan(num):
        return True
    return bool(num)


def cast_argument(text, param_type, context=None):
    """Convert the argument *text* into a value according to
    *param_type*, a type descriptor as returned by
    :func:`get_param_type`. *context* is the :class:`ParseContext`
    passed along to custom cast functions.

    Unrecognized types produce None.
    """
    kind = param_type.kind if isinstance(param_type, ParamType) else None
    if kind == 'string':
        return text
    elif kind == 'number':
        return to_number(text)
    elif kind == 'boolean':
        return to_boolean(text)
    elif kind == 'custom':
        return param_type.cast_func(text, context)
    return None
