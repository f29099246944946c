from valcss.cli.main import cli

cli()
