"""Scoped output buffer handed to renderers."""

from __future__ import annotations

import io


class OutputCapture(io.StringIO):
    """Collect text written by a template while it renders.

    A named ``StringIO`` so renderers can be typed against it. The buffer is
    only usable while open; leaving the ``with`` block closes it whether or not
    rendering raised, and any later read or write raises ``ValueError``.
    """
