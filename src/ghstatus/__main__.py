from ghstatus import main

main()
