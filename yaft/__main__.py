from yaft.cli import main

main()
