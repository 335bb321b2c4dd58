# ruff: noqa: E402
import sys
from pathlib import Path

# ensure src is on PYTHONPATH
src_path = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(src_path))

import pytest
import immugraph
from immugraph import Edge, Graph


@pytest.fixture(autouse=True)
def fresh_state():
    immugraph.reset()
    yield
    immugraph.reset()


@pytest.fixture
def tree() -> Graph:
    return Graph.from_pairs(
        [("a", "b"), ("a", "c"), ("a", "d"), ("b", "e"), ("c", "f"), ("d", "g")]
    )


@pytest.fixture
def cyclic() -> Graph:
    return Graph([
        Edge("a", "b"),
        Edge("a", "c"),
        Edge("a", "d"),
        Edge("b", "e"),
        Edge("e", "a"),
    ])
