#!/usr/bin/env python
"""A tiny CLI showing the pieces a command layer wires around clime:
a schema, a help provider, and the error/help presentation.

   ./greet.py World --times 3 -s
   ./greet.py --help

"""

import os
import sys

from clime import (ArgsParser,
                   Schema,
                   ParamDefinition,
                   ParamsDefinition,
                   OptionDefinition,
                   UsageError,
                   NUMBER)


USAGE = '''\
Usage: greet <name> [others...] [options]

Options:
  --times / -t TIMES   how many times to greet (defaults to 1)
  --shout / -s         greet loudly
'''


class GreetHelp(object):
    def print(self, stdout, stderr):
        stdout.write(USAGE)


class GreetCommand(object):
    schema = Schema(params=[ParamDefinition('name', required=True)],
                    variadic=ParamsDefinition('others'),
                    options=[OptionDefinition('times', flag='t', type=NUMBER, default=1),
                             OptionDefinition('shout', flag='s', toggle=True)])

    def get_help(self):
        return GreetHelp()

    def execute(self, name, others, options, context):
        names = [name] + others
        greeting = 'Hello, %s!' % ', '.join(names)
        if options['shout']:
            greeting = greeting.upper()
        for _ in range(int(options['times'])):
            print(greeting)
        return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    cmd = GreetCommand()
    prs = ArgsParser(cmd, cmd.schema)
    try:
        res = prs.parse(argv, cwd=os.getcwd(), commands=['greet'])
    except UsageError as ue:
        ue.print(sys.stdout, sys.stderr)
        return 1
    if res.help:
        cmd.get_help().print(sys.stdout, sys.stderr)
        return 0
    return cmd.execute(*res.get_execute_args())


if __name__ == '__main__':
    sys.exit(main())
