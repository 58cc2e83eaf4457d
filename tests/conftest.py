from __future__ import annotations

from typing import Callable, Optional

import pytest

from decint.core import constants


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def synthetic_caps(monkeypatch) -> Callable[..., None]:
    """Shrink MAX_GROUPS / MAX_DIGITS for the duration of one test.

    Exercising the real caps would need a 4-billion-digit value.
    """

    def _set(max_groups: Optional[int] = None, max_digits: Optional[int] = None) -> None:
        if max_groups is not None:
            monkeypatch.setattr(constants, "MAX_GROUPS", max_groups)
        if max_digits is not None:
            monkeypatch.setattr(constants, "MAX_DIGITS", max_digits)

    return _set
