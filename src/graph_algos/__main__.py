from graph_algos._cli.main import main

main()
