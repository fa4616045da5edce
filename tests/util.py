from contextlib import contextmanager

import pytest


@contextmanager
def not_raises(exception, message: str | None = ""):
    try:
        yield
    except exception:
        if message != "":
            raise pytest.fail(message.format(exc=exception))  # noqa: B904
        else:
            raise pytest.fail(f"DID RAISE {exception}")  # noqa: B904
