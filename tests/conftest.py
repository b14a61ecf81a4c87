from pytest import Item, fixture

from infixcalc import Evaluator, Lexer, Converter, Machine


@fixture
def evaluator():
    return Evaluator()


@fixture
def lexer():
    return Lexer()


@fixture
def converter():
    return Converter()


@fixture
def machine():
    return Machine()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Needs enable_assertion_pass_hook; use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
