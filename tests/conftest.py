import pytest
import rotmatrix as rm
from rotmatrix.names import *

# (width, height) pairs, including degenerate and non-square grids
dimensions = [(4, 3), (3, 3), (1, 5), (5, 1), (0, 0), (0, 4)]


@pytest.fixture(params=dimensions, scope="session")
def dims(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for parametrized declared dimensions."""
    return request.param


@pytest.fixture(params=list(rm.Rotation), scope="session")
def rotation(request: pytest.FixtureRequest) -> rm.Rotation:
    """Provide session-level fixture for all rotations."""
    return request.param


@pytest.fixture(params=[rm.Rotation.N180, rm.Rotation.N270], scope="session")
def unsupported_rotation(request: pytest.FixtureRequest) -> rm.Rotation:
    """Provide session-level fixture for rotations without own lookup algorithm."""
    return request.param


@pytest.fixture
def matrix_4x3():
    """4x3 matrix holding the values 0..11 in row-major order."""
    return rm.Matrix.from_elements(4, 3, list(range(12)))
