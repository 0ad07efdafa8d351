import pickle

from manyzip import EXHAUSTED, Exhausted


def test_exhausted_marker():
    assert isinstance(EXHAUSTED, Exhausted)
    assert repr(EXHAUSTED) == "EXHAUSTED"
    assert pickle.loads(pickle.dumps(EXHAUSTED)) is EXHAUSTED
