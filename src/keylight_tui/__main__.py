from keylight_tui.keylight_controller import main

main()
