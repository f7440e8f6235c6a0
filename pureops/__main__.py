from pureops.cli import run

run()
