from css_optimizer.cli.main import cli

__all__ = ["cli"]
