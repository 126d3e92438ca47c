import pytest
from lj_sweep.cli import main
from lj_sweep.errors import InvalidNumber
from lj_sweep.utils import parse_distance_bound, format_sample


@pytest.mark.parametrize("text,value",
    [('5.0', 5.0),
     ('  5', 5.0),
     ('-3.5', -3.5),
     ('+2', 2.0),
     ('.5', 0.5),
     ('1e1', 10.0),
     ('2.5E-1', 0.25),
     ('7abc', 7.0),
     ('3.5.1', 3.5),
     ('1e', 1.0),
     ('abc', 0.0),
     ('', 0.0),
     ('-', 0.0),
     ('INF', float('inf')),
     ('-infinity', float('-inf'))]
)
def test_lenient_parse(text, value):
    assert parse_distance_bound(text) == value


def test_lenient_parse_nan():
    value = parse_distance_bound('nan')
    assert value != value


@pytest.mark.parametrize("text", ['abc', '', '7abc', '3.5.1', '1e'])
def test_strict_parse_rejects(text):
    with pytest.raises(InvalidNumber):
        parse_distance_bound(text, strict=True)


@pytest.mark.parametrize("text,value", [('5.0', 5.0), (' -2 ', -2.0), ('1e1\n', 10.0)])
def test_strict_parse_accepts(text, value):
    assert parse_distance_bound(text, strict=True) == value


def test_format_sample():
    assert format_sample(-5.0, 123.456789) == 'r = -5.000000 Angstrom, V_lg = 1.234568E+02 kJ/mol'
    assert format_sample(0.0, float('inf')) == 'r = 0.000000 Angstrom, V_lg = INF kJ/mol'


def test_main(capsys):
    assert main(['5.0']) == 0

    captured = capsys.readouterr()
    lines = captured.out.splitlines()

    assert len(lines) == 11
    assert lines[0] == 'Lennard-Jones Potential'
    assert all(line.endswith(' kJ/mol') for line in lines[1:])
    assert captured.err == ''


def test_main_negative_bound_is_not_an_option(capsys):
    assert main(['-5']) == 0
    assert capsys.readouterr().out == 'Lennard-Jones Potential\n'


def test_main_lenient_non_numeric(capsys):
    assert main(['abc']) == 0
    assert capsys.readouterr().out == 'Lennard-Jones Potential\n'


def test_main_strict_non_numeric(capsys):
    assert main(['--strict', 'abc']) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Not a number' in captured.err


@pytest.mark.parametrize("argv", [[], ['--strict']])
def test_main_missing_argument(capsys, argv):
    assert main(argv) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Usage' in captured.err
    assert 'Missing distance bound' in captured.err


def test_main_unbounded(capsys):
    assert main(['1e30']) == 1
    assert 'too large' in capsys.readouterr().err
