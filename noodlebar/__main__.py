from noodlebar.cli import main

main()
