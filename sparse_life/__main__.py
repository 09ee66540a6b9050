from sparse_life.main import main

main()
