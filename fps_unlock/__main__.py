from fps_unlock.main import main

main()
