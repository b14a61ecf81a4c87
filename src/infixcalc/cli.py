from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys
import traceback

from prompt_toolkit import PromptSession

from .util import CalcError
from .evaluator import Evaluator


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix evaluator.
    '''

    DEFAULT_PROMPT = '= '

    # Keypad symbols to evaluator operators
    SYMBOLS = str.maketrans({
        '\N{MULTIPLICATION SIGN}': '*',
        '\N{DIVISION SIGN}': '/',
        '\N{MINUS SIGN}': '-',
    })

    def _evaluator(self):
        return Evaluator(angle='rad' if self.args.radians else 'deg',
                         substitute_constants=self.args.substitute_constants)

    def _expressions(self):
        '''
        Yield non-blank expressions, keypad symbols translated.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line:
                yield line.translate(type(self).SYMBOLS)

    def format(self, value):
        '''
        Round result to precision, if set.
        '''
        if self.args.precision is not None:
            value = round(value, self.args.precision)
        return repr(value)

    def dumper(self):
        '''
        Dump tokens and postfix form of each expression.
        '''
        evaluator = self._evaluator()
        print('<tokens>\t<postfix>')
        for expression in self._expressions():
            try:
                preprocessed = evaluator.preprocessor.preprocess(expression)
                tokens = evaluator.lexer.lex(preprocessed)
                postfix = evaluator.converter.convert(tokens)
            except CalcError as e:
                self.error(e)
                continue
            print(' '.join(map(str, tokens)),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate each expression and print its value.
        '''
        evaluator = self._evaluator()
        for expression in self._expressions():
            try:
                value = evaluator.evaluate(expression)
            # Abort just this line
            except CalcError as e:
                self.error(e)
                continue
            print(self.format(value), flush=True)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(self._evaluator().lexer.LEXEME)

    def error(self, e):
        if self.args.verbose:
            traceback.print_exception(type(e), e, e.__traceback__,
                                      file=sys.stderr)
        print('Error:', e.args[0], file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix scientific calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-r', '--radians',
                                          action='store_true',
                                          help='trig functions work in '
                                               'radians, not degrees')
        self.argument_parser.add_argument('-s', '--substitute-constants',
                                          action='store_true',
                                          help='replace pi and e in the '
                                               'text before lexing')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round output to this many '
                                               'decimal places')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
