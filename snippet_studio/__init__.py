"""Snippet Studio: sandboxed previews and entitlement-gated export of UI snippets."""

__version__ = "0.3.0"
