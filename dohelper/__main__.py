from dohelper.cli import run

run()
