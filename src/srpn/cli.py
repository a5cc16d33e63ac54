from os import path
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import FatalError
from .machine import Machine
from .infix import InfixConverter
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the SRPN machine.

    The I/O shell around it: feeds it lines, and honours its crashes.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.srpn_history'
    # The legacy calculator segfaults on longer lines.
    MAX_LINE = 128
    LINE_TOO_LONG = 139

    def dumper(self):
        '''
        Dump all lexemes, their kind, and infix conversions.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(lexeme)>\t[postfix]')
        for line in self._lines():
            for match in lexer.lex(line):
                (kind, lexeme), = lexer.matchedgroups(match).items()
                if kind == 'infix':
                    print(kind, repr(lexeme),
                          repr(InfixConverter().convert(lexeme)),
                          sep='\t')
                else:
                    print(kind, repr(lexeme), sep='\t')

    def executor(self):
        '''
        Run machine (SRPN calculator).
        '''
        machine = Machine(seed=self.args.seed, verbose=self.args.verbose)
        for line in self._lines():
            try:
                machine.process(line)
            except FatalError as e:
                exit(e.status)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _lines(self):
        '''
        Yield input lines without terminators, dying on overlong ones.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if len(line) > self.MAX_LINE:
                exit(self.LINE_TOO_LONG)
            yield line

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           stdin.isatty() and stdout.isatty():
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            # The legacy calculator reads US-ASCII.
            stdin.reconfigure(encoding='ascii', errors='replace')
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Saturating RPN calculator, bug for bug')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--seed',
                                          type=int,
                                          default=Machine.DEFAULT_SEED)
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
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
