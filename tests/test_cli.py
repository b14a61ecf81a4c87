'''
Command line tests
'''

import io

from infixcalc.cli import CLI, InteractiveInput

from pytest import raises


def run(*args):
    CLI().run(args=list(args))


def test_expressions(capsys):
    run('-e', '2+3*4', '(2+3', '5/2')
    out, err = capsys.readouterr()
    assert out.splitlines() == ['14.0', '2.5']
    assert err == 'Error: Mismatched parentheses\n'


def test_blank_lines_skipped(capsys):
    run('-e', '', '  ', '7')
    out, err = capsys.readouterr()
    assert out == '7.0\n'
    assert err == ''


def test_keypad_symbols(capsys):
    run('-e', '6\N{MULTIPLICATION SIGN}7', '9\N{DIVISION SIGN}3')
    assert capsys.readouterr().out.splitlines() == ['42.0', '3.0']


def test_precision(capsys):
    run('-k', '3', '-e', '2/3')
    assert capsys.readouterr().out == '0.667\n'


def test_radians(capsys):
    run('-r', '-e', 'cos(0)', 'sin(0)')
    assert capsys.readouterr().out.splitlines() == ['1.0', '0.0']


def test_dump(capsys):
    run('-D', '-e', '2+3*4')
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['<tokens>\t<postfix>',
                                '2 + 3 * 4\t2 3 4 * +']


def test_raw_grammar(capsys):
    run('-G', '-e', '1')
    assert '(?<number>' in capsys.readouterr().out


def test_verbose_traceback(capsys):
    run('-v', '-e', '2@3')
    err = capsys.readouterr().err
    assert 'Traceback' in err
    assert err.endswith("Error: Invalid character '@'\n")


def test_exclusive_modes():
    with raises(SystemExit):
        run('-D', '-G', '-e', '1')


class Pipe(io.StringIO):
    '''
    Piped standard input.
    '''
    def fileno(self):
        return 0


def test_reads_piped_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', Pipe('2+3\n\n4*5\n'))
    monkeypatch.setattr('infixcalc.cli.isatty', lambda fd: False)
    run()
    out, err = capsys.readouterr()
    assert out.splitlines() == ['5.0', '20.0']
    assert err == ''


def test_prompt_requested(monkeypatch):
    monkeypatch.setattr('infixcalc.cli.isatty', lambda fd: False)
    cli = CLI()
    cli.args = cli.argument_parser.parse_args(['-p'])
    prompting = cli._prompting_input()
    assert isinstance(prompting, InteractiveInput)
    assert prompting.prompt == CLI.DEFAULT_PROMPT


def test_interrupt_exits(monkeypatch):
    def interrupted(self):
        raise KeyboardInterrupt
    monkeypatch.setattr(CLI, 'executor', interrupted)
    with raises(SystemExit) as info:
        run('-e', '1')
    assert info.value.code == 1
