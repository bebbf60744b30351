from intraday_quote.main import main

main()
