from linerev.cli import main

main()
