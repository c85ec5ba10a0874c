"""Command line interface for the Incapsula client."""
