from shopfront.app import main

main()
