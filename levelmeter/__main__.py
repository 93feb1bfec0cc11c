from levelmeter.app.main import main

main()
