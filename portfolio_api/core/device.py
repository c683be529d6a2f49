"""Device detection for the sentiment model.

Supports:
- Apple Silicon MPS
- NVIDIA CUDA
- CPU fallback
"""

import logging

import torch

logger = logging.getLogger(__name__)


def get_device() -> str:
    """Detect the best available compute device.

    Priority order: MPS, CUDA, CPU.

    Returns:
        Device string: "mps", "cuda", or "cpu"
    """
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        try:
            # MPS can report available yet fail on first allocation
            _ = torch.zeros(1, device="mps")
            return "mps"
        except RuntimeError:
            logger.warning("MPS reported available but is not functional, skipping")

    if torch.cuda.is_available():
        return "cuda"

    return "cpu"
