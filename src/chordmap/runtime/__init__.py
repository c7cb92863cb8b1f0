"""Runtime services shared by the keymap package."""
