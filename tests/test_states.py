import pytest

from phosynth.states import PhoState


@pytest.mark.parametrize(
    "state, expected",
    [
        (PhoState.OK, False),
        (PhoState.EOF, True),
        (PhoState.FLUSH, True),
        (PhoState.ERROR, False),
    ],
)
def test_ends_chunk(state, expected):
    assert state.ends_chunk() is expected


def test_order_of_states():
    assert list(PhoState) == [PhoState.OK, PhoState.EOF, PhoState.FLUSH, PhoState.ERROR]
    assert PhoState(0) is PhoState.OK


def test_unknown_state_rejected():
    with pytest.raises(ValueError):
        PhoState(7)