"""
Tests for views.vector_view module.
"""

import pytest
import torch

from core.game_state import Game, new_game
from core.tower import TowerId
from views.vector_view import VectorView


def test_vector_view_initialization():
    view = VectorView(disc_count=4, device="cpu")

    assert view.encoding_dim == 20
    assert view.device == torch.device("cpu")


def test_encode_initial_state():
    """Test the encoding of the starting layout."""
    view = VectorView(disc_count=4, device="cpu")
    encoding = view.encode(new_game().snapshot())

    assert encoding.shape == (20,)
    assert encoding.dtype == torch.float32

    towers = encoding[:12].reshape(3, 4)
    assert torch.equal(towers[TowerId.LEFT], torch.zeros(4))
    assert torch.allclose(towers[TowerId.MIDDLE], torch.tensor([0.25, 0.45, 0.65, 0.85]))
    assert torch.equal(towers[TowerId.RIGHT], torch.zeros(4))

    assert torch.equal(encoding[12:15], torch.tensor([0.0, 1.0, 0.0]))  # pointer
    assert torch.equal(encoding[15:19], torch.tensor([1.0, 0.0, 0.0, 0.0]))  # idle
    assert encoding[19].item() == 0.0


def test_encode_bottom_aligned_towers():
    """Test partial towers fill the bottom slots."""
    view = VectorView(disc_count=4, device="cpu")
    game = new_game()
    game.activate()
    game.retreat_pointer()
    game.activate()

    towers = view.encode_towers(game.snapshot())

    assert torch.allclose(towers[TowerId.LEFT], torch.tensor([0.0, 0.0, 0.0, 0.25]))
    assert torch.allclose(towers[TowerId.MIDDLE], torch.tensor([0.0, 0.45, 0.65, 0.85]))


def test_encode_armed_and_pointer():
    view = VectorView(disc_count=4, device="cpu")
    game = new_game()
    game.activate()
    game.advance_pointer()

    encoding = view.encode(game.snapshot())

    assert torch.equal(encoding[12:15], torch.tensor([0.0, 0.0, 1.0]))
    assert torch.equal(encoding[15:19], torch.tensor([0.0, 0.0, 1.0, 0.0]))


def test_encode_rejects_wrong_disc_count():
    view = VectorView(disc_count=3, device="cpu")

    with pytest.raises(ValueError):
        view.encode(Game((25, 45, 65, 85)).snapshot())


def test_to_device():
    view = VectorView(disc_count=4, device="cpu")

    assert view.to("cpu") is view
    assert view.device == torch.device("cpu")
