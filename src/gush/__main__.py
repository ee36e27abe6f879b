from gush.cli.cli import main

main()
