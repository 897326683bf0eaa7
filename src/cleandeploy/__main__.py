from cleandeploy.cli import main

main()
