
class ClimeException(Exception):
    """The basest base exception clime has. Rarely directly instantiated
    if ever, but useful for catching.
    """
    pass


class UsageError(ClimeException):
    """Raised by :meth:`ArgsParser.parse()` when the arguments passed on
    the command line don't satisfy the command's schema. This is the
    only error kind raised during parsing, and it is always terminal
    for that parse.

    Args:
       help_provider: The object responsible for usage text of the
          current command. Anything with a ``get_help()`` method
          returning an object with a ``print(stdout, stderr)`` method
          will do. May be None.
       message (str): The user-facing description of what went wrong.

    The message text is stable, callers may match on it.
    """
    def __init__(self, help_provider, message):
        super(UsageError, self).__init__(message)
        self.help_provider = help_provider
        self.message = message

    def print(self, stdout, stderr):
        """Write the error message to *stderr*, followed by the help
        text of the command, as rendered by the help provider.
        """
        stderr.write('%s.\n' % self.message)

        if self.help_provider is None:
            return
        self.help_provider.get_help().print(stdout, stderr)

    def __repr__(self):
        cn = self.__class__.__name__
        return '%s(%r, %r)' % (cn, self.help_provider, self.message)
