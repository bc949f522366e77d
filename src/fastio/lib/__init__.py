"""Core fastio library: templates, argument capture, rendering and substitution."""
