from pytest import fixture

from srpn.machine import Machine


@fixture
def machine() -> Machine:
    '''
    Fresh machine, seeded like the legacy calculator.
    '''
    return Machine()
