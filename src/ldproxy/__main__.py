from ldproxy.cli import main

main()
