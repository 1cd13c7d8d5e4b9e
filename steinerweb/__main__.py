from steinerweb.cli import main

main()
