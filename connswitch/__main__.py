from connswitch.cli import main

main()
