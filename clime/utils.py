
import re


# one or more runs of letters, digits and underscores, joined by
# single hyphens, e.g., "build", "make-config", "sub_cmd-2"
VALID_COMMAND_NAME_RE = re.compile(r"^[A-Za-z0-9_]+(?:-[A-Za-z0-9_]+)*\Z")


def is_valid_command_name(name):
    """Returns True if *name* can be used as a segment of a command
    path. Valid names consist of ASCII letters, digits and underscores,
    optionally separated into parts by single hyphens. Leading,
    trailing, and doubled hyphens are not allowed.

    >>> is_valid_command_name('make-config')
    True
    >>> is_valid_command_name('--help')
    False
    """
    if not name or not isinstance(name, str):
        return False
    return VALID_COMMAND_NAME_RE.match(name) is not None


def process_definition_name(name, kind='parameter'):
    """Validate the name of a parameter or option definition. Option
    names may be passed in their long form, with the two leading
    dashes, which are stripped.
    """
    orig_name = name
    if not name or not isinstance(name, str):
        raise ValueError('expected non-zero length string for %s name, not: %r'
                         % (kind, name))
    if name[:2] == '--':
        name = name[2:]
    if not name or name[0] == '-':
        raise ValueError('expected %s name not starting with a dash, not: %r'
                         % (kind, orig_name))
    if any(c.isspace() for c in name):
        raise ValueError('expected %s name without whitespace, not: %r'
                         % (kind, orig_name))
    return name


def process_flag_char(char):
    """Validate a single-character option flag, optionally prefixed by
    a dash, returning the bare character.
    """
    orig_char = char
    if not char or not isinstance(char, str):
        raise ValueError('expected non-zero length string for flag, not: %r' % (char,))
    if char[0] == '-' and len(char) > 1:
        char = char[1:]
    if len(char) != 1:
        raise ValueError('flags must be exactly one character, optionally'
                         ' prefixed by a dash, not: %r' % orig_char)
    if char == '-' or char.isspace():
        raise ValueError('expected a flag character other than a dash'
                         ' or whitespace, not: %r' % orig_char)
    return char


def format_name_list(names):
    "Backtick-quote and comma-join names, as used in usage messages"
    return ', '.join(['`%s`' % name for name in names])
