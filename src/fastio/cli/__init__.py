"""Command line surface for fastio."""
