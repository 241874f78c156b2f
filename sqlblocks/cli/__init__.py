"""Command line interface for sqlblocks."""
