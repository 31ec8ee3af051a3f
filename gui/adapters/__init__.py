"""GUI adapter layer.

This package provides thin Qt-shaped adapters over engine services.

Notes
-----
Adapters exist to:
- keep GUI code free of persistence details,
- turn engine state changes into Qt signals that widgets can react to,
- translate engine storage errors into user-visible messages.
"""
