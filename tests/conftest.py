import pytest

import mwm
from mwm import backend as B

BACKENDS = ['numpy'] + (['torch'] if B._torch_available else [])


@pytest.fixture(params=BACKENDS)
def backend(request):
    """Run a test once per available array backend, restoring the previous one."""
    previous = mwm.get_backend()
    mwm.set_backend(request.param)
    yield request.param
    mwm.set_backend(previous)
