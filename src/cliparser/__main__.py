from cliparser.cli import main

main()
