from trigram_markov.cli import run

run()
