
import io

import pytest

from clime import (ArgsParser,
                   Schema,
                   ParamDefinition,
                   ParamsDefinition,
                   OptionDefinition,
                   ClimeException,
                   UsageError,
                   NUMBER,
                   is_valid_command_name)


def test_command_name():
    for name in ['foo', 'foo-bar', 'a_1-b2', '_private', '2fa', 'x-y-z']:
        assert is_valid_command_name(name), name

    for name in ['', '-foo', 'foo-', 'foo--bar', 'foo bar', 'foo.bar',
                 '--help', 'naïve', None, 5]:
        assert not is_valid_command_name(name), name


def test_definition_names():
    assert OptionDefinition('--dry-run').name == 'dry-run'
    assert OptionDefinition('verbose', flag='-v').flag == 'v'

    name_err_map = {'': 'non-zero length string',
                    5: 'non-zero length string',
                    '--': 'not starting with a dash',
                    '-x': 'not starting with a dash',
                    'two words': 'without whitespace'}

    for name, err in name_err_map.items():
        with pytest.raises(ValueError, match=err):
            OptionDefinition(name)
        with pytest.raises(ValueError, match=err):
            ParamDefinition(name)


def test_flag_chars():
    for flag in ['ab', '--', '-', ' ']:
        with pytest.raises(ValueError):
            OptionDefinition('name', flag=flag)


def test_toggle_default():
    assert OptionDefinition('quiet', toggle=True).default is False
    assert OptionDefinition('quiet', toggle=True, default=False).default is False
    with pytest.raises(ValueError, match='toggle options always default to False'):
        OptionDefinition('quiet', toggle=True, default=True)


def test_schema_conflicts():
    with pytest.raises(ValueError, match='duplicate definition for option name'):
        Schema(options=[OptionDefinition('out'), OptionDefinition('--out')])

    with pytest.raises(ValueError, match='conflicting flag'):
        Schema(options=[OptionDefinition('out', flag='o'),
                        OptionDefinition('only', flag='o')])

    with pytest.raises(ValueError, match='duplicate parameter names'):
        Schema(params=[ParamDefinition('a'), ParamDefinition('a')])

    with pytest.raises(ValueError, match='required_count'):
        Schema(params=[ParamDefinition('a')], required_count=2)

    with pytest.raises(ValueError, match='must precede optional'):
        Schema(params=[ParamDefinition('a'), ParamDefinition('b', required=True)])

    with pytest.raises(TypeError):
        Schema(params=['a'])

    with pytest.raises(TypeError):
        Schema(variadic=ParamDefinition('rest'))


def test_schema_required_count():
    schema = Schema(params=[ParamDefinition('a', required=True),
                            ParamDefinition('b', required=True),
                            ParamDefinition('c')])
    assert schema.required_count == 2
    assert [p.name for p in schema.required_params] == ['a', 'b']

    assert Schema().required_count == 0


def test_reprs():
    assert repr(ParamDefinition('a')) == "ParamDefinition('a', type=STRING)"
    assert repr(OptionDefinition('n', flag='n', type=NUMBER)).startswith("OptionDefinition('n', flag='n'")
    assert repr(ParamsDefinition('rest', required=True)) == "ParamsDefinition('rest', type=STRING, required=True)"

    prs = ArgsParser(None, Schema())
    assert repr(prs).startswith('<ArgsParser')
    assert repr(prs.parse([])).startswith('<ParsedResult')


class _HelpInfo(object):
    def print(self, stdout, stderr):
        stdout.write('Usage: tool <name>\n')


class _HelpProvider(object):
    def get_help(self):
        return _HelpInfo()


def test_usage_error_print():
    stdout, stderr = io.StringIO(), io.StringIO()

    err = UsageError(_HelpProvider(), 'Expecting argument(s) `name`')
    assert isinstance(err, ClimeException)
    err.print(stdout, stderr)

    assert stderr.getvalue() == 'Expecting argument(s) `name`.\n'
    assert stdout.getvalue() == 'Usage: tool <name>\n'

    stdout, stderr = io.StringIO(), io.StringIO()
    UsageError(None, 'Unknown option `x`').print(stdout, stderr)
    assert stderr.getvalue() == 'Unknown option `x`.\n'
    assert stdout.getvalue() == ''


def test_usage_error_from_parse(capsys):
    import sys

    schema = Schema(params=[ParamDefinition('name', required=True)])
    prs = ArgsParser(_HelpProvider(), schema)
    with pytest.raises(UsageError) as exc_info:
        prs.parse([])
    exc_info.value.print(sys.stdout, sys.stderr)

    out, err = capsys.readouterr()
    assert err == 'Expecting argument(s) `name`.\n'
    assert 'Usage' in out
