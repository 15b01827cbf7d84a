"""
Device management utilities for PyTorch.

Picks the tensor device used for game encodings: CUDA (NVIDIA), MPS (Apple
Silicon) or CPU. Set HANOI_DEVICE to force a specific device.
"""

from __future__ import annotations

import logging
import os

import torch

logger = logging.getLogger(__name__)

_DEVICE_NAMES = {
    "cuda": "CUDA",
    "mps": "MPS (Apple Silicon)",
    "cpu": "CPU",
}


def _detect_device() -> torch.device:
    """Best available device, honoring the HANOI_DEVICE override."""
    override = os.environ.get("HANOI_DEVICE", "").strip().lower()
    if override:
        if override in _DEVICE_NAMES:
            return torch.device(override)
        logger.warning(f"Unknown HANOI_DEVICE '{override}', falling back to auto-detection")

    if torch.cuda.is_available():
        return torch.device("cuda")
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return torch.device("mps")
    return torch.device("cpu")


def get_device() -> torch.device:
    """
    Get the default compute device.

    Returns:
        torch.device: HANOI_DEVICE if set, else best available (CUDA > MPS > CPU)
    """
    return _detect_device()


def get_device_name(device: torch.device | None = None) -> str:
    """
    Get human-readable device name.

    Args:
        device: Device to name (defaults to get_device())

    Returns:
        str: Device name (e.g., "CUDA", "MPS (Apple Silicon)", "CPU")
    """
    device = resolve_device(device)
    return _DEVICE_NAMES.get(device.type, device.type.upper())


def resolve_device(device=None) -> torch.device:
    """Normalize a device argument, defaulting to get_device()."""
    if device is None:
        return get_device()
    return torch.device(device) if isinstance(device, str) else device
