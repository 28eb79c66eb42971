from text_frequency.cli import run

run()
