"""CLI and web entry points around the quickadd parser."""
