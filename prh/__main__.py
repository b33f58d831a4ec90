from prh.cli.app import main

main()
