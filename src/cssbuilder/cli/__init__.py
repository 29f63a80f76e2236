from cssbuilder.cli.main import cli

__all__ = ["cli"]
