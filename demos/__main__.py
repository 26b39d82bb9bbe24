from .runner import cli

cli()
