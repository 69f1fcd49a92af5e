# trigram_markov/utils/__init__.py
# logging and settings helpers shared by the engine and the CLI
