from flashcards.main import run

run()
