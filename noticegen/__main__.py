from noticegen.cli import main

main()
