import pytest

import cuteargs
from cuteargs import const


def test_ensure_same_version():
    cuteargs.ensure(const.VERSION[:3])


def test_ensure_older_patch():
    cuteargs.ensure((const.VERSION[0], const.VERSION[1], 0))


def test_ensure_newer_minor():
    with pytest.raises(RuntimeError):
        cuteargs.ensure((const.VERSION[0], const.VERSION[1] + 1, 0))
