"""`Megh-Net` - cold cloud segmentation and trajectory extrapolation.

Subpackages:
- imagery: Image decoding, cloud segmentation, trajectory prediction
- pipeline: Three-frame sequence processing
- contracts: Stage invariants
- schemas: Configuration
"""

__version__ = "0.1.0"
