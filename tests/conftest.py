from pytest import Item, fixture

from rpncalc.lexer import Lexer
from rpncalc.machine import Machine


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def lexer() -> Lexer:
    return Lexer()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
