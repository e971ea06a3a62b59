from .lineatur import main

main()
