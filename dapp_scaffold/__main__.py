from dapp_scaffold.cli import main

main()
