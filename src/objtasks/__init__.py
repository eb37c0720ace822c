"""objtasks: small object utilities -- shapes, JSON helpers, CSS selector builder."""

__version__ = "0.1.0"
