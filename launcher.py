"""
ProjektAgenda Launcher.
Entry point for PyInstaller to ensure correct package resolution.
"""

from src.app.entry import main

if __name__ == "__main__":
    main()
