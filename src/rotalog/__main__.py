from rotalog.main import run

run()
