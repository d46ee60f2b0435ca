from tradewhisper.cli import main

main()
