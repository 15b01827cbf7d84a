"""
Vector view for encoding game snapshots as tensors.

This module provides the VectorView class that turns a GameSnapshot into a
flat float tensor suitable as an agent observation.
"""

from __future__ import annotations

from typing import Optional
import torch

from core.game_state import GameSnapshot
from core.tower import TowerId
from utils.device import resolve_device

N_TOWERS = len(TowerId)


class VectorView:
    """
    Encodes snapshots as fixed-size float tensors.

    Layout of the encoding (length 3 * disc_count + 8):
        [0, 3*disc_count)   disc widths / 100 per tower slot, bottom-aligned,
                            0 for empty slots (tower-major, top to bottom)
        next 3              pointer one-hot
        next 4              selection one-hot (idle, armed L, armed M, armed R)
        last 1              finished flag

    Attributes:
        disc_count: Number of discs in the encoded game
        device: Device tensors are created on
    """

    def __init__(self, disc_count: int = 4, device: Optional[torch.device | str] = None):
        """
        Initialize vector view.

        Args:
            disc_count: Number of discs in the game
            device: Device to store tensors on (cpu/cuda/mps)
        """
        self.disc_count = disc_count
        self.device = resolve_device(device)

    @property
    def encoding_dim(self) -> int:
        return N_TOWERS * self.disc_count + N_TOWERS + (N_TOWERS + 1) + 1

    def encode_towers(self, snapshot: GameSnapshot) -> torch.Tensor:
        """
        Encode disc widths per tower.

        Returns:
            [3, disc_count] tensor of widths / 100
        """
        slots = torch.zeros((N_TOWERS, self.disc_count), dtype=torch.float32, device=self.device)
        for tower_id in TowerId:
            widths = snapshot.tower(tower_id)
            if widths:
                offset = self.disc_count - len(widths)
                slots[tower_id, offset:] = torch.tensor(widths, dtype=torch.float32, device=self.device) / 100.0
        return slots

    def encode(self, snapshot: GameSnapshot) -> torch.Tensor:
        """
        Encode a snapshot.

        Args:
            snapshot: Game state to encode

        Returns:
            [encoding_dim] float tensor

        Raises:
            ValueError: If the snapshot has a different disc count
        """
        if snapshot.disc_count != self.disc_count:
            raise ValueError(
                f"Expected snapshot with {self.disc_count} discs, got {snapshot.disc_count}"
            )

        pointer = torch.zeros(N_TOWERS, dtype=torch.float32, device=self.device)
        pointer[snapshot.pointer] = 1.0

        selection = torch.zeros(N_TOWERS + 1, dtype=torch.float32, device=self.device)
        selection[0 if snapshot.armed is None else int(snapshot.armed) + 1] = 1.0

        finished = torch.tensor([float(snapshot.finished)], device=self.device)

        return torch.cat([self.encode_towers(snapshot).flatten(), pointer, selection, finished])

    def to(self, device: torch.device | str) -> VectorView:
        """
        Move future encodings to the specified device.

        Returns:
            Self (for method chaining)
        """
        self.device = resolve_device(device)
        return self
