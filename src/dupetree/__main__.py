from dupetree.cli import main

main()
