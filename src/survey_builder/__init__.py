"""
Survey Builder Core Package

The question-list state machine behind a survey builder: questions and
options, the action-driven reducer, the completeness rule gating new
questions, and the response map the preview surface writes into.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Layout or rendering
    - Presentational components
    - Scrolling, clipboard or display formatting

All rendering happens in external layers.
All layers consume this model unchanged.
"""

__version__ = "0.1.0"
