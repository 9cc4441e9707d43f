# cwc/tests/unit/test_monetary.py
import sys
import os
from decimal import Decimal

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

import pytest

from cwc.core.utils.monetary import Monetary


@pytest.mark.parametrize("lovelace, ada", [
    (0, Decimal("0")),
    (1, Decimal("0.000001")),
    ("5000000", Decimal("5")),
    (45_000_000_000_000_000, Decimal("45000000000")),
])
def test_to_ada_is_exact(lovelace, ada):
    assert Monetary.to_ada(lovelace) == ada


@pytest.mark.parametrize("bad", ["abc", -1, 1.5, True, None])
def test_to_ada_rejects_corrupt_input(bad):
    with pytest.raises(ValueError, match="corrupto"):
        Monetary.to_ada(bad)
