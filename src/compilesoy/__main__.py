from compilesoy.cli import main

main()
