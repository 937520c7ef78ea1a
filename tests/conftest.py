"""
Test configuration and fixtures.
"""

import pytest

from deltag import DeltaG, Conditions
from deltag.thermo import derive_delta_g


@pytest.fixture
def calculator():
    """Calculator at default conditions (37 °C, 1 M [Na+])."""
    return DeltaG()


@pytest.fixture
def default_table():
    """Free-energy table at default conditions."""
    return derive_delta_g(Conditions())


@pytest.fixture
def sample_sequences():
    """Sample sequences for testing."""
    return {
        "reference": "TAACAAGCAATGAGATAGAGAAAGAAATATATCCA",
        "palindrome": "GAATTC",
        "gc_rich": "GCGCGCGCGC",
        "at_rich": "ATATATATAT",
    }
