from contentforge.server.main import main

main()
