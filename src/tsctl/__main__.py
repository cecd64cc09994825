from tsctl.cli import cli

cli()
