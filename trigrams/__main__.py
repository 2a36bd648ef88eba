from trigrams.main import run

run()
