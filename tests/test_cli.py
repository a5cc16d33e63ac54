'''
SRPN command line tests
'''

import io

from pytest import raises

from srpn.cli import CLI


def test_expressions(capsys):
    CLI().run(args=['-e', '1 2 +', 'd'])
    assert capsys.readouterr() == ('3\n', '')


def test_crash_stops_everything(capsys):
    with raises(SystemExit) as e:
        CLI().run(args=['-e', '5 0 %', 'd'])
    assert e.value.code == 136
    assert capsys.readouterr() == ('', '')


def test_line_too_long(capsys):
    with raises(SystemExit) as e:
        CLI().run(args=['-e', '1 d', '1' * 129, 'd'])
    assert e.value.code == 139
    assert capsys.readouterr().out == '1\n'


def test_longest_line(capsys):
    CLI().run(args=['-e', '1' * 128 + '\n', 'd'])
    assert capsys.readouterr().out == '2147483647\n'


def test_seed(capsys):
    CLI().run(args=['-s', '1', '-e', 'r ='])
    assert capsys.readouterr().out == '1804289383\n'


def test_verbose(capsys):
    CLI().run(args=['-v', '-e', '2*3'])
    assert capsys.readouterr().err == '2*3 -> 2 3 * \n'


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1+2 080'])
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["infix\t'1+2'\t'1 2 + '",
                       "malformed\t'080'"]


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    assert '(?<octal>' in capsys.readouterr().out


def test_wide_seed_wraps(capsys):
    CLI().run(args=['-s', str(2 ** 32 + 1), '-e', 'r ='])
    assert capsys.readouterr().out == '1804289383\n'


def test_stdin_is_ascii_until_end_of_input(monkeypatch, capsys):
    piped = io.TextIOWrapper(io.BytesIO(b'1 2 +\n\xe9\nd\n'))
    monkeypatch.setattr('srpn.cli.stdin', piped)
    CLI().run(args=[])
    out, err = capsys.readouterr()
    assert out == '3\n'
    assert err == 'Unrecognised operator or operand "\ufffd".\n'


def test_stdin_crash_drops_the_rest(monkeypatch, capsys):
    piped = io.TextIOWrapper(io.BytesIO(b'1 2 +\nd\n5 0 %\nd\n'))
    monkeypatch.setattr('srpn.cli.stdin', piped)
    with raises(SystemExit) as e:
        CLI().run(args=[])
    assert e.value.code == 136
    assert capsys.readouterr().out == '3\n'
