from gradlegraph.cli import main

main()
