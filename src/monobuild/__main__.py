from monobuild.ui.cli import run

run()
