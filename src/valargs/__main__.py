from valargs.main import run

run()
