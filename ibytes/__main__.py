from ibytes.cli.app import cli

cli()
