from lokalise_mcp.app import main

main()
